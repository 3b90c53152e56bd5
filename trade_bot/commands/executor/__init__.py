"""
Command executor for running commands behind a deferred acknowledgment
and delivering exactly one terminal reply.
"""

from .command_executor import CommandExecutor

__all__ = ["CommandExecutor"]
