from typing import List, Optional

from pydantic import BaseModel, Field

from trade_bot.config.constants import (
    SERVER_LINK_LABEL,
    TRADE_EMBED_COLOR,
    TRADE_EMBED_DESCRIPTION,
    TRADE_EMBED_FOOTER,
    TRADE_EMBED_TITLE,
)
from trade_bot.models.trade import TradeRequest


class NotificationField(BaseModel):
    name: str
    value: str
    inline: bool = False


class TradeNotification(BaseModel):
    """
    Platform-neutral rich message posted to the trade channel.

    Adapters render this into the platform's own message type, so the
    notification is always complete before anything is sent.
    """

    title: str
    description: str
    color: int
    fields: List[NotificationField] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None
    footer: Optional[str] = None

    def get_field(self, name: str) -> Optional[NotificationField]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


def format_server_link(link: str) -> str:
    """Wrap a link in a clickable markdown label"""
    return f"[{SERVER_LINK_LABEL}]({link})"


def build_trade_notification(request: TradeRequest) -> TradeNotification:
    """Build the trade channel notification for a validated request"""
    return TradeNotification(
        title=TRADE_EMBED_TITLE,
        description=TRADE_EMBED_DESCRIPTION,
        color=TRADE_EMBED_COLOR,
        fields=[
            NotificationField(name="Trader", value=request.trader.mention),
            NotificationField(
                name="Item to Trade", value=request.item_to_trade, inline=True
            ),
            NotificationField(
                name="Item Looking For", value=request.item_looking_for, inline=True
            ),
            NotificationField(
                name="Private Server Link",
                value=format_server_link(request.private_server_link),
            ),
        ],
        thumbnail_url=request.trader.avatar_url,
        footer=TRADE_EMBED_FOOTER,
    )
