"""
Health check endpoint for monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from spellcomplete.schemas.spellcheck import HealthResponse
from spellcomplete.services.spellcheck import SpellCheckEngine, get_spellcheck_engine
from spellcomplete.utils.logger import get_logger

logger = get_logger("health")
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check application and dictionary status",
    responses={
        200: {"description": "Service is running (healthy or degraded)"}
    }
)
async def health_check(
    engine: SpellCheckEngine = Depends(get_spellcheck_engine),
) -> HealthResponse:
    """
    Health check endpoint.

    The service keeps answering without dictionaries (empty results), so a
    failed or pending load reports 'degraded' rather than an error status.

    Returns:
        HealthResponse with status, dictionary state and timestamp
    """
    state = engine.manager.state
    if engine.is_loaded:
        logger.debug("Health check: all systems operational")
        status = "healthy"
    else:
        logger.warning("Health check: dictionaries not loaded", state=state.value, error=engine.error)
        status = "degraded"

    return HealthResponse(
        status=status,
        dictionaries=state,
        timestamp=datetime.now(timezone.utc)
    )
