import logging
from typing import Dict, Optional

import discord

from trade_bot.models.notifications import TradeNotification
from trade_bot.models.trade import Trader

logger = logging.getLogger(__name__)


def to_embed(notification: TradeNotification) -> discord.Embed:
    """Render a trade notification as a Discord embed"""
    embed = discord.Embed(
        title=notification.title,
        description=notification.description,
        color=notification.color,
    )
    for field in notification.fields:
        embed.add_field(name=field.name, value=field.value, inline=field.inline)
    if notification.thumbnail_url:
        embed.set_thumbnail(url=notification.thumbnail_url)
    if notification.footer:
        embed.set_footer(text=notification.footer)
    return embed


class DiscordInvocation:
    """A slash command interaction with its resolved option values"""

    def __init__(self, interaction: discord.Interaction, options: Dict[str, str]):
        self._interaction = interaction
        self._options = options

    @property
    def id(self) -> str:
        return str(self._interaction.id)

    @property
    def user(self) -> Trader:
        user = self._interaction.user
        return Trader(mention=user.mention, avatar_url=user.display_avatar.url)

    def get_string(self, name: str) -> Optional[str]:
        return self._options.get(name)

    async def defer(self) -> None:
        await self._interaction.response.defer(ephemeral=True)

    async def reply(self, content: str) -> None:
        await self._interaction.edit_original_response(content=content)


class DiscordChannel:
    def __init__(self, channel: discord.abc.Messageable):
        self._channel = channel

    async def send(self, notification: TradeNotification) -> None:
        await self._channel.send(embed=to_embed(notification))


class DiscordSession:
    """Channel lookup over the connected client's cache"""

    def __init__(self, client: discord.Client):
        self._client = client

    def get_channel(self, channel_id: int) -> Optional[DiscordChannel]:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            return None
        if not isinstance(channel, discord.abc.Messageable):
            logger.warning(
                f"Channel {channel_id} is a {type(channel).__name__}, "
                "which cannot receive messages"
            )
            return None
        return DiscordChannel(channel)
