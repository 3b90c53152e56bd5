from typing import Optional, Protocol

from trade_bot.models.notifications import TradeNotification
from trade_bot.models.trade import Trader


class Invocation(Protocol):
    """
    One inbound slash command invocation.

    Implemented by the Discord adapter in production and by in-memory
    fakes in tests.
    """

    @property
    def user(self) -> Trader: ...

    def get_string(self, name: str) -> Optional[str]:
        """Return the value of a named string option"""
        ...

    async def defer(self) -> None:
        """Acknowledge the invocation so a reply can follow later"""
        ...

    async def reply(self, content: str) -> None:
        """Send the final reply to the invoker"""
        ...


class DestinationChannel(Protocol):
    """Channel that trade notifications are posted to"""

    async def send(self, notification: TradeNotification) -> None: ...


class PlatformSession(Protocol):
    """Long-lived platform connection shared by every invocation"""

    def get_channel(self, channel_id: int) -> Optional[DestinationChannel]:
        """Look up a channel from the local cache, None if unavailable"""
        ...
