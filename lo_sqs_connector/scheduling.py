import structlog
from apscheduler.schedulers.background import BackgroundScheduler

from .application.services import ConnectorService

logger = structlog.get_logger()

SEND_JOB_ID = "send_queued_messages"


def send_job(connector: ConnectorService) -> None:
    """Job that runs on schedule to forward queued messages."""
    try:
        connector.send()
    except Exception as e:
        logger.warning("Send job failed, will run again next interval", error=str(e))


def create_scheduler(connector: ConnectorService, interval_seconds: float) -> BackgroundScheduler:
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        send_job,
        "interval",
        seconds=interval_seconds,
        args=[connector],
        id=SEND_JOB_ID,
        max_instances=1,  # Prevent overlapping cycles
        coalesce=True,
    )
    return scheduler
