import asyncio
import logging

import uvicorn

from trade_bot.app import create_app
from trade_bot.commands.executor.command_executor import CommandExecutor
from trade_bot.commands.registry.command_registry import CommandRegistry
from trade_bot.config.logging_config import configure_logging
from trade_bot.config.settings import Settings, load_settings
from trade_bot.discord_adapter.bot import TradeBot

logger = logging.getLogger(__name__)


def build_bot(settings: Settings) -> TradeBot:
    registry = CommandRegistry()
    executor = CommandExecutor(registry)
    return TradeBot(executor, trade_channel_id=settings.trade_channel_id)


async def run(settings: Settings) -> None:
    """Run the Discord connection and the health web server side by side"""
    bot = build_bot(settings)
    server = uvicorn.Server(
        uvicorn.Config(
            create_app(bot),
            host="0.0.0.0",
            port=settings.port,
            log_config=None,  # Keep the logging configured at startup
        )
    )

    logger.info(f"Web server listening on port {settings.port}")
    async with bot:
        await asyncio.gather(bot.start(settings.discord_bot_token), server.serve())


def main() -> None:
    configure_logging()
    settings = load_settings()
    configure_logging(settings.log_level)

    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
