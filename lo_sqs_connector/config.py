from pydantic import field_validator
from pydantic_settings import BaseSettings

# SendMessageBatch accepts at most 10 entries per call
SQS_MAX_BATCH_ENTRIES = 10


class Settings(BaseSettings):
    """Connector settings loaded from environment."""

    # Service
    service_name: str = "lo-sqs-connector"
    log_level: str = "INFO"
    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # Live Objects (MQTT FIFO)
    lo_hostname: str = "liveobjects.orange-business.com"
    lo_port: int = 8883
    lo_use_tls: bool = True
    lo_api_key: str = ""
    lo_client_id: str = "lo-sqs-connector"
    lo_topics: list[str] = []  # FIFO names, subscribed as fifo/<name>
    lo_message_qos: int = 1
    lo_keep_alive_seconds: int = 30
    lo_message_batch_size: int | None = None  # Unset or non-positive means 10

    # Batching
    message_queue_capacity: int | None = None  # None keeps the queue unbounded
    synchronization_interval_seconds: float = 10.0

    # AWS
    sqs_queue_name: str = ""
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None  # For LocalStack

    @field_validator("lo_message_batch_size")
    @classmethod
    def _batch_fits_sqs(cls, value: int | None) -> int | None:
        if value is not None and value > SQS_MAX_BATCH_ENTRIES:
            raise ValueError(
                f"lo_message_batch_size must not exceed {SQS_MAX_BATCH_ENTRIES} (SQS batch limit)"
            )
        return value

    @field_validator("lo_message_qos")
    @classmethod
    def _valid_qos(cls, value: int) -> int:
        if value not in (0, 1, 2):
            raise ValueError("lo_message_qos must be 0, 1 or 2")
        return value

    @field_validator("message_queue_capacity")
    @classmethod
    def _positive_capacity(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("message_queue_capacity must be positive when set")
        return value

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
