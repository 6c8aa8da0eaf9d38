import asyncio
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import get_connector_service
from .presentation.api.v1 import health
from .scheduling import create_scheduler

# Configure logging
configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the connector and its send schedule; flush and stop on shutdown."""
    logger.info(
        "Starting connector service",
        service=settings.service_name,
        queue_name=settings.sqs_queue_name,
        fifos=settings.lo_topics,
    )

    connector = get_connector_service()
    # boto3 and paho calls block; keep them off the event loop
    await asyncio.to_thread(connector.start)

    scheduler = create_scheduler(connector, settings.synchronization_interval_seconds)
    scheduler.start()
    logger.info(
        "Scheduler started",
        interval_seconds=settings.synchronization_interval_seconds,
    )

    yield

    await asyncio.to_thread(scheduler.shutdown, wait=True)
    await asyncio.to_thread(connector.stop)
    # Forward what arrived before the feed was disconnected
    try:
        await asyncio.to_thread(connector.send)
    except Exception as e:
        logger.error("Final flush failed", error=str(e))
    logger.info("Connector shutdown complete")


app = FastAPI(
    title="Live Objects to SQS connector",
    description="Forwards Live Objects FIFO messages to AWS SQS in batches",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": "0.1.0",
    }


def run() -> None:
    """Console entry point."""
    uvicorn.run(app, host=settings.http_host, port=settings.http_port, log_config=None)


if __name__ == "__main__":
    run()
