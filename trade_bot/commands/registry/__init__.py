"""
Command registry for command lookup and slash command schemas.
"""

from .command_registry import CommandRegistry

__all__ = ["CommandRegistry"]
