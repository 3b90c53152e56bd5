"""
Discord trade bot.

Relays /trade slash command submissions to a fixed trade channel and
serves a liveness endpoint for the hosting platform.
"""

__version__ = "1.0.0"
