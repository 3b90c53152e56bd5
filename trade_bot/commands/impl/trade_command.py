import logging
import time
from typing import Dict

from trade_bot.commands.errors import (
    ConfigurationError,
    DispatchError,
    TradeBotError,
    ValidationError,
)
from trade_bot.commands.interfaces.command import Command
from trade_bot.commands.interfaces.command_context import CommandContext
from trade_bot.commands.interfaces.command_result import CommandResult
from trade_bot.commands.interfaces.invocation import DestinationChannel
from trade_bot.config.constants import (
    TRADE_COMMAND_DESCRIPTION,
    TRADE_COMMAND_NAME,
    TRADE_COMMAND_OPTIONS,
    TRADE_SENT_MESSAGE,
)
from trade_bot.models.notifications import build_trade_notification
from trade_bot.models.trade import TradeRequest

logger = logging.getLogger(__name__)


class TradeCommand(Command):
    """
    Command behind /trade.

    Resolves the trade channel, validates the private server link, and posts
    a trade notification to the channel exactly once. Every outcome becomes
    a CommandResult whose reply_content is the message shown to the trader:
    - trade channel missing: configuration error reply, nothing sent
    - link does not match the server link pattern: format error reply,
      nothing sent
    - sending to the channel fails: generic failure reply, logged, no retry
    """

    def get_command_name(self) -> str:
        return TRADE_COMMAND_NAME

    def get_description(self) -> str:
        return TRADE_COMMAND_DESCRIPTION

    def get_options(self) -> Dict[str, str]:
        return dict(TRADE_COMMAND_OPTIONS)

    def supports_retry(self) -> bool:
        return False  # Posting to the channel is not idempotent

    def validate_context(self, context: CommandContext) -> bool:
        """Validate that context has what the trade workflow needs"""
        if not context.invocation_id:
            logger.error("invocation_id is required for trade command")
            return False

        if context.session is None:
            logger.error("session is required for trade command")
            return False

        if not context.trade_channel_id:
            logger.error("trade_channel_id is required for trade command")
            return False

        return True

    async def execute(self, context: CommandContext) -> CommandResult:
        """Execute the trade request workflow"""
        start_time = time.time()

        try:
            channel = self._resolve_trade_channel(context)
            request = self._read_trade_request(context)

            if not request.has_valid_server_link():
                raise ValidationError(
                    f"Invalid private server link: {request.private_server_link!r}"
                )

            notification = build_trade_notification(request)

            try:
                await channel.send(notification)
            except Exception as e:
                raise DispatchError(
                    f"Failed to send message to trade channel "
                    f"{context.trade_channel_id}: {e}",
                    original_error=e,
                ) from e

            execution_time = (time.time() - start_time) * 1000

            logger.info(
                f"Trade request from {request.trader.mention} sent to channel "
                f"{context.trade_channel_id} for invocation {context.invocation_id}"
            )

            return CommandResult.success(
                invocation_id=context.invocation_id,
                command_name=self.get_command_name(),
                reply_content=TRADE_SENT_MESSAGE,
                execution_time_ms=execution_time,
                data={
                    "trade_channel_id": context.trade_channel_id,
                    "item_to_trade": request.item_to_trade,
                    "item_looking_for": request.item_looking_for,
                },
            )

        except TradeBotError as e:
            execution_time = (time.time() - start_time) * 1000
            self._log_failure(context, e)

            return CommandResult.failure(
                invocation_id=context.invocation_id,
                command_name=self.get_command_name(),
                reply_content=e.reply_content,
                error_message=str(e),
                execution_time_ms=execution_time,
                error_details={"error_type": type(e).__name__},
            )

    def _resolve_trade_channel(self, context: CommandContext) -> DestinationChannel:
        channel = context.session.get_channel(context.trade_channel_id)
        if channel is None:
            raise ConfigurationError(
                f"Trade channel {context.trade_channel_id} could not be found"
            )
        return channel

    def _read_trade_request(self, context: CommandContext) -> TradeRequest:
        invocation = context.invocation
        return TradeRequest(
            trader=invocation.user,
            item_to_trade=invocation.get_string("item_to_trade") or "",
            item_looking_for=invocation.get_string("item_looking_for") or "",
            private_server_link=invocation.get_string("private_server_link") or "",
        )

    def _log_failure(self, context: CommandContext, error: TradeBotError) -> None:
        if isinstance(error, ValidationError):
            # User input problem, not an operator concern
            logger.info(
                f"Rejected trade request for invocation {context.invocation_id}: "
                f"{error}"
            )
        elif isinstance(error, DispatchError):
            logger.error(
                f"Trade request failed for invocation {context.invocation_id}: "
                f"{error}",
                exc_info=error.original_error,
            )
        else:
            logger.error(
                f"Trade request failed for invocation {context.invocation_id}: "
                f"{error}"
            )
