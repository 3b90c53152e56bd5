from typing import Dict, List, Optional

import pytest

from trade_bot.commands.executor.command_executor import CommandExecutor
from trade_bot.commands.interfaces.command_context import CommandContext
from trade_bot.commands.registry.command_registry import CommandRegistry
from trade_bot.models.notifications import TradeNotification
from trade_bot.models.trade import Trader

TRADE_CHANNEL_ID = 1419373453626183760
VALID_SERVER_LINK = "https://www.roblox.com/share?code=ABC123XYZ&type=Server"


class FakeInvocation:
    """In-memory invocation that records acknowledgments and replies"""

    def __init__(
        self,
        options: Dict[str, str],
        user: Optional[Trader] = None,
        fail_defer: bool = False,
        fail_reply: bool = False,
    ) -> None:
        self.options = options
        self._user = user or Trader(
            mention="<@42>", avatar_url="https://cdn.discordapp.com/avatars/42/a.png"
        )
        self.fail_defer = fail_defer
        self.fail_reply = fail_reply
        self.deferred = 0
        self.replies: List[str] = []

    @property
    def user(self) -> Trader:
        return self._user

    def get_string(self, name: str) -> Optional[str]:
        return self.options.get(name)

    async def defer(self) -> None:
        self.deferred += 1
        if self.fail_defer:
            raise RuntimeError("Unknown interaction")

    async def reply(self, content: str) -> None:
        if self.fail_reply:
            raise RuntimeError("Interaction has already been acknowledged")
        self.replies.append(content)


class FakeChannel:
    """Trade channel that keeps sent notifications in memory"""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.sent: List[TradeNotification] = []
        self.send_attempts = 0

    async def send(self, notification: TradeNotification) -> None:
        self.send_attempts += 1
        if self.error is not None:
            raise self.error
        self.sent.append(notification)


class FakeSession:
    def __init__(self, channels: Optional[Dict[int, FakeChannel]] = None) -> None:
        self.channels = channels if channels is not None else {}
        self.lookups: List[int] = []

    def get_channel(self, channel_id: int) -> Optional[FakeChannel]:
        self.lookups.append(channel_id)
        return self.channels.get(channel_id)


def trade_options(link: str = VALID_SERVER_LINK) -> Dict[str, str]:
    return {
        "item_to_trade": "Dragon Egg",
        "item_looking_for": "Golden Pet",
        "private_server_link": link,
    }


@pytest.fixture
def trade_channel() -> FakeChannel:
    """Fixture for a working trade channel"""
    return FakeChannel()


@pytest.fixture
def session(trade_channel: FakeChannel) -> FakeSession:
    """Fixture for a session that can see the trade channel"""
    return FakeSession({TRADE_CHANNEL_ID: trade_channel})


@pytest.fixture
def invocation() -> FakeInvocation:
    """Fixture for a /trade invocation with a valid link"""
    return FakeInvocation(trade_options())


@pytest.fixture
def trade_context(invocation: FakeInvocation, session: FakeSession) -> CommandContext:
    """Command context for trade command testing"""
    return CommandContext(
        invocation_id="1234567890",
        invocation=invocation,
        session=session,
        trade_channel_id=TRADE_CHANNEL_ID,
    )


@pytest.fixture
def command_registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def command_executor(command_registry: CommandRegistry) -> CommandExecutor:
    return CommandExecutor(command_registry)
