import logging
import time
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from trade_bot.config.constants import HEALTHY_TEXT
from trade_bot.discord_adapter.bot import TradeBot
from trade_bot.models.responses import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


# Dependency functions
def get_bot(request: Request) -> Optional[TradeBot]:
    """Get the bot attached to the running app, if any"""
    return getattr(request.app.state, "bot", None)


def _describe_bot(bot: Optional[TradeBot]) -> Dict[str, Dict[str, Any]]:
    if bot is None:
        return {"discord": {"status": "not_configured"}}

    checks: Dict[str, Dict[str, Any]] = {}
    try:
        checks["discord"] = bot.get_status()
    except Exception as e:
        logger.warning(f"Could not read bot status: {e}")
        checks["discord"] = {"status": "unknown", "error": str(e)}

    try:
        registry = bot.executor.command_registry
        checks["commands"] = {
            "status": "registered",
            "available": registry.get_available_commands(),
        }
        checks["executor"] = bot.executor.get_execution_metrics()
    except Exception as e:
        logger.warning(f"Could not read command executor state: {e}")
        checks["commands"] = {"status": "unknown", "error": str(e)}

    return checks


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness check for the hosting platform; always healthy"""
    return HEALTHY_TEXT


@router.get("/healthz", response_model=HealthCheckResponse)
async def health_check(bot: Optional[TradeBot] = Depends(get_bot)) -> HealthCheckResponse:
    """
    Health check with informational component details.

    The reported status is always 'healthy': the process answering is the
    only liveness signal. Component checks are there for operators and never
    change the status.
    """
    return HealthCheckResponse(
        status="healthy",
        job_id=str(uuid.uuid4()),
        timestamp=time.time(),
        checks=_describe_bot(bot),
    )
