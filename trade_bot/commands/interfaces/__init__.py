"""
Command pattern interfaces for the trade bot.
"""

from .command import Command
from .command_context import CommandContext
from .command_result import CommandResult, CommandStatus
from .invocation import DestinationChannel, Invocation, PlatformSession

__all__ = [
    "Command",
    "CommandContext",
    "CommandResult",
    "CommandStatus",
    "DestinationChannel",
    "Invocation",
    "PlatformSession",
]
