"""
Discord adapter: binds the command layer to discord.py.
"""

from .bot import TradeBot
from .invocation import DiscordChannel, DiscordInvocation, DiscordSession, to_embed

__all__ = [
    "TradeBot",
    "DiscordChannel",
    "DiscordInvocation",
    "DiscordSession",
    "to_embed",
]
