import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from trade_bot.config.constants import DEFAULT_PORT, DEFAULT_TRADE_CHANNEL_ID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Process configuration read once at startup."""

    discord_bot_token: str
    port: int = DEFAULT_PORT
    trade_channel_id: int = DEFAULT_TRADE_CHANNEL_ID
    log_level: str = "DEBUG"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment, after merging an optional .env file.

    Variables already present in the environment win over the .env file.

    Raises:
        ValueError: If DISCORD_BOT_TOKEN is missing, a numeric variable
            cannot be parsed, or TRADE_CHANNEL_ID is not positive
    """
    if load_dotenv(env_file):
        logger.info("Loaded environment from .env file")
    else:
        logger.info("No .env file found, using system environment variables")

    token = os.environ.get("DISCORD_BOT_TOKEN")
    if not token:
        raise ValueError("DISCORD_BOT_TOKEN environment variable is required")

    trade_channel_id = _int_from_env("TRADE_CHANNEL_ID", DEFAULT_TRADE_CHANNEL_ID)
    if trade_channel_id <= 0:
        raise ValueError(
            f"TRADE_CHANNEL_ID must be a positive channel id, got {trade_channel_id}"
        )

    return Settings(
        discord_bot_token=token,
        port=_int_from_env("PORT", DEFAULT_PORT),
        trade_channel_id=trade_channel_id,
        log_level=os.environ.get("LOG_LEVEL", "DEBUG").upper(),
    )
