import logging
import math
from typing import Any, Dict, Optional

import discord
from discord import app_commands

from trade_bot.commands.errors import RegistrationError
from trade_bot.commands.executor.command_executor import CommandExecutor
from trade_bot.commands.interfaces.command_context import CommandContext
from trade_bot.config.constants import (
    CHANNEL_NOT_FOUND_MESSAGE,
    PRESENCE_ACTIVITY_NAME,
    TRADE_COMMAND_NAME,
    UNEXPECTED_ERROR_MESSAGE,
)
from trade_bot.discord_adapter.invocation import DiscordInvocation, DiscordSession

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    """Guilds intent only; slash commands need nothing else"""
    intents = discord.Intents.none()
    intents.guilds = True
    return intents


class TradeBot(discord.Client):
    """
    Discord client that serves the /trade slash command.

    The client owns the gateway connection and hands every /trade
    interaction to the command executor together with a DiscordSession,
    which is the only way commands reach the connection.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        trade_channel_id: int,
        intents: Optional[discord.Intents] = None,
    ):
        super().__init__(intents=intents or default_intents())
        self.executor = executor
        self.trade_channel_id = trade_channel_id
        self.session = DiscordSession(self)
        self.tree = app_commands.CommandTree(self)
        self.tree.add_command(self._build_trade_command())
        self._commands_registered = False

    def _build_trade_command(self) -> app_commands.Command:
        schema = next(
            s
            for s in self.executor.command_registry.get_command_schemas()
            if s["name"] == TRADE_COMMAND_NAME
        )

        async def trade(
            interaction: discord.Interaction,
            item_to_trade: str,
            item_looking_for: str,
            private_server_link: str,
        ) -> None:
            await self.handle_trade_interaction(
                interaction,
                {
                    "item_to_trade": item_to_trade,
                    "item_looking_for": item_looking_for,
                    "private_server_link": private_server_link,
                },
            )

        app_commands.describe(
            **{option["name"]: option["description"] for option in schema["options"]}
        )(trade)
        return app_commands.Command(
            name=schema["name"], description=schema["description"], callback=trade
        )

    async def handle_trade_interaction(
        self, interaction: discord.Interaction, options: Dict[str, str]
    ) -> None:
        invocation = DiscordInvocation(interaction, options)
        try:
            context = CommandContext(
                invocation_id=invocation.id,
                invocation=invocation,
                session=self.session,
                trade_channel_id=self.trade_channel_id,
                metadata={"guild_id": interaction.guild_id},
            )
        except ValueError as e:
            # An unusable channel id is a configuration problem for the trader
            reply_content = (
                CHANNEL_NOT_FOUND_MESSAGE
                if not self.trade_channel_id or self.trade_channel_id < 0
                else UNEXPECTED_ERROR_MESSAGE
            )
            await self.executor.reject_invocation(
                TRADE_COMMAND_NAME,
                invocation,
                invocation.id,
                reply_content=reply_content,
                error_message=str(e),
            )
            return

        await self.executor.execute_command(TRADE_COMMAND_NAME, context)

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}!")

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching, name=PRESENCE_ACTIVITY_NAME
            ),
            status=discord.Status.online,
        )

        # on_ready fires again after reconnects
        if self._commands_registered:
            return

        try:
            await self.register_commands()
        except RegistrationError as e:
            logger.error(str(e), exc_info=e.__cause__)

    async def register_commands(self) -> None:
        """
        Declare the slash commands to Discord globally.

        Raises:
            RegistrationError: When Discord rejects the command tree
        """
        try:
            synced = await self.tree.sync()
        except discord.DiscordException as e:
            raise RegistrationError(f"Failed to register slash commands: {e}") from e

        self._commands_registered = True
        logger.info(
            f"Slash commands registered successfully: {[c.name for c in synced]}"
        )

    def get_status(self) -> Dict[str, Any]:
        """Connection details for the health endpoint"""
        latency = self.latency
        return {
            "status": "connected" if self.is_ready() else "connecting",
            "user": str(self.user) if self.user else None,
            "latency_ms": round(latency * 1000, 2) if math.isfinite(latency) else None,
            "commands_registered": self._commands_registered,
            "trade_channel_id": str(self.trade_channel_id),
        }
