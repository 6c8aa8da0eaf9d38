import structlog
from fastapi import APIRouter, Depends, Response, status

from ....application.services import ConnectorService
from ....domain.message_queue import MessageQueue
from ....infrastructure.health import ConnectorHealth
from ..dependencies import get_connector_health, get_connector_service, get_message_queue

router = APIRouter(tags=["health"])
logger = structlog.get_logger()


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Basic liveness check."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness(
    response: Response,
    connector_health: ConnectorHealth = Depends(get_connector_health),
    queue: MessageQueue = Depends(get_message_queue),
    connector: ConnectorService = Depends(get_connector_service),
) -> dict:
    """Readiness check - reports Live Objects and SQS link status."""
    links = connector_health.snapshot()
    checks = {
        "live_objects": {"status": "healthy" if links["upstream"] else "unhealthy"},
        "sqs": {"status": "healthy" if links["downstream"] else "unhealthy"},
    }

    all_healthy = all(c["status"] == "healthy" for c in checks.values())
    if not all_healthy:
        logger.warning("Readiness degraded", **links)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "ready" if all_healthy else "degraded",
        "checks": checks,
        "connector": connector.state.value,
        "pending_messages": len(queue),
    }
