from typing import Optional

from trade_bot.config.constants import (
    CHANNEL_NOT_FOUND_MESSAGE,
    DISPATCH_FAILED_MESSAGE,
    INVALID_LINK_MESSAGE,
)


class TradeBotError(Exception):
    """Base error; carries the reply shown to the invoker"""

    reply_content: str = DISPATCH_FAILED_MESSAGE

    def __init__(self, message: str, reply_content: Optional[str] = None):
        super().__init__(message)
        if reply_content is not None:
            self.reply_content = reply_content


class ConfigurationError(TradeBotError):
    """Raised when the trade channel cannot be resolved"""

    reply_content = CHANNEL_NOT_FOUND_MESSAGE


class ValidationError(TradeBotError):
    """Raised when a private server link does not match the expected format"""

    reply_content = INVALID_LINK_MESSAGE


class DispatchError(TradeBotError):
    """Raised when posting the notification to the trade channel fails"""

    reply_content = DISPATCH_FAILED_MESSAGE

    def __init__(self, message: str, original_error: Exception):
        self.original_error = original_error
        super().__init__(message)


class RegistrationError(TradeBotError):
    """Raised when slash command registration with Discord fails"""
