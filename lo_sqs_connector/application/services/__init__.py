from .batch_dispatcher import DEFAULT_BATCH_SIZE, BatchDispatcher, resolve_batch_size
from .connector_service import ConnectorService, ConnectorState

__all__ = [
    "BatchDispatcher",
    "ConnectorService",
    "ConnectorState",
    "DEFAULT_BATCH_SIZE",
    "resolve_batch_size",
]
