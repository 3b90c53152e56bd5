"""
Command implementations for the trade bot.
"""

from .trade_command import TradeCommand

__all__ = ["TradeCommand"]
