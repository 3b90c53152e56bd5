import logging
from types import SimpleNamespace

import discord
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from trade_bot.commands.executor.command_executor import CommandExecutor
from trade_bot.config.constants import (
    CHANNEL_NOT_FOUND_MESSAGE,
    INVALID_LINK_MESSAGE,
    TRADE_SENT_MESSAGE,
)
from trade_bot.discord_adapter.bot import TradeBot, default_intents
from tests.conftest import TRADE_CHANNEL_ID, trade_options


@pytest.fixture
def bot(command_executor: CommandExecutor) -> TradeBot:
    return TradeBot(command_executor, trade_channel_id=TRADE_CHANNEL_ID)


@pytest.fixture
def mock_interaction() -> MagicMock:
    interaction = MagicMock()
    interaction.id = 99
    interaction.guild_id = 5
    interaction.user.mention = "<@42>"
    interaction.user.display_avatar.url = "https://cdn.example/42.png"
    interaction.response.defer = AsyncMock()
    interaction.edit_original_response = AsyncMock()
    return interaction


class TestTradeBot:
    def test_default_intents_only_guilds(self) -> None:
        intents = default_intents()

        assert intents.guilds is True
        assert intents.messages is False
        assert intents.members is False

    @pytest.mark.asyncio
    async def test_trade_command_declared_on_tree(self, bot: TradeBot) -> None:
        command = bot.tree.get_command("trade")

        assert command is not None
        assert command.description == (
            "Sends a trade request to the designated channel."
        )
        assert [(p.name, p.required) for p in command.parameters] == [
            ("item_to_trade", True),
            ("item_looking_for", True),
            ("private_server_link", True),
        ]
        assert command.parameters[2].description == (
            "The private server link for the trade."
        )

    @pytest.mark.asyncio
    async def test_handle_trade_interaction_posts_to_trade_channel(
        self, bot: TradeBot, mock_interaction: MagicMock
    ) -> None:
        text_channel = MagicMock(spec=discord.TextChannel)
        text_channel.send = AsyncMock()

        with patch.object(bot, "get_channel", return_value=text_channel) as get_channel:
            await bot.handle_trade_interaction(mock_interaction, trade_options())

        get_channel.assert_called_once_with(TRADE_CHANNEL_ID)
        text_channel.send.assert_awaited_once()
        mock_interaction.response.defer.assert_awaited_once_with(ephemeral=True)
        mock_interaction.edit_original_response.assert_awaited_once_with(
            content=TRADE_SENT_MESSAGE
        )

    @pytest.mark.asyncio
    async def test_handle_trade_interaction_rejects_bad_link(
        self, bot: TradeBot, mock_interaction: MagicMock
    ) -> None:
        text_channel = MagicMock(spec=discord.TextChannel)
        text_channel.send = AsyncMock()

        with patch.object(bot, "get_channel", return_value=text_channel):
            await bot.handle_trade_interaction(
                mock_interaction, trade_options("not-a-link")
            )

        text_channel.send.assert_not_awaited()
        mock_interaction.edit_original_response.assert_awaited_once_with(
            content=INVALID_LINK_MESSAGE
        )

    @pytest.mark.asyncio
    async def test_on_ready_sets_presence_and_registers_commands(
        self, bot: TradeBot
    ) -> None:
        with patch.object(bot, "change_presence", AsyncMock()) as change_presence, \
                patch.object(
                    bot.tree, "sync", AsyncMock(return_value=[SimpleNamespace(name="trade")])
                ) as sync:
            await bot.on_ready()
            await bot.on_ready()

        activity = change_presence.await_args.kwargs["activity"]
        assert activity.type == discord.ActivityType.watching
        assert activity.name == "/trade"
        assert change_presence.await_args.kwargs["status"] == discord.Status.online
        # Registration happens once even if on_ready fires again
        sync.assert_awaited_once()
        assert bot.get_status()["commands_registered"] is True

    @pytest.mark.asyncio
    async def test_registration_failure_is_logged_not_raised(
        self, bot: TradeBot, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch.object(bot, "change_presence", AsyncMock()), \
                patch.object(
                    bot.tree,
                    "sync",
                    AsyncMock(side_effect=discord.DiscordException("Missing Access")),
                ), \
                caplog.at_level(logging.ERROR):
            await bot.on_ready()

        assert "Failed to register slash commands" in caplog.text
        assert bot.get_status()["commands_registered"] is False

    @pytest.mark.asyncio
    async def test_status_before_connecting(self, bot: TradeBot) -> None:
        status = bot.get_status()

        assert status["status"] == "connecting"
        assert status["user"] is None
        assert status["latency_ms"] is None
        assert status["trade_channel_id"] == str(TRADE_CHANNEL_ID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("channel_id", [0, -1])
    async def test_unusable_channel_id_still_defers_and_replies_once(
        self,
        command_executor: CommandExecutor,
        mock_interaction: MagicMock,
        channel_id: int,
    ) -> None:
        bot = TradeBot(command_executor, trade_channel_id=channel_id)

        with patch.object(bot, "get_channel") as get_channel:
            await bot.handle_trade_interaction(mock_interaction, trade_options())

        get_channel.assert_not_called()
        mock_interaction.response.defer.assert_awaited_once_with(ephemeral=True)
        mock_interaction.edit_original_response.assert_awaited_once_with(
            content=CHANNEL_NOT_FOUND_MESSAGE
        )
        metrics = command_executor.get_execution_metrics()
        assert metrics["total_executions"] == 1
        assert metrics["failed_executions"] == 1
