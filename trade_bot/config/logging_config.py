import logging


def configure_logging(app_level: str = "DEBUG") -> None:
    """Configure process-wide logging for the bot and its health server."""
    logging.basicConfig(
        level=logging.WARNING,  # Set default to WARNING for all loggers
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    # Application loggers follow the configured level
    logging.getLogger("trade_bot").setLevel(app_level)
    logging.getLogger("__main__").setLevel(app_level)

    # Keep third-party loggers at INFO or WARNING to reduce noise
    logging.getLogger("discord").setLevel(logging.INFO)
    logging.getLogger("discord.gateway").setLevel(logging.WARNING)
    logging.getLogger("discord.http").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
