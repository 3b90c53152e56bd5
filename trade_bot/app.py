from typing import Optional

from fastapi import FastAPI

from trade_bot import __version__
from trade_bot.discord_adapter.bot import TradeBot
from trade_bot.routers import health


def create_app(bot: Optional[TradeBot] = None) -> FastAPI:
    """Build the health check web app, optionally bound to a running bot"""
    app = FastAPI(
        title="Trade Bot",
        description="Liveness endpoints for the Discord trade bot",
        version=__version__,
    )
    app.state.bot = bot

    app.include_router(health.router)
    return app


app = create_app()
