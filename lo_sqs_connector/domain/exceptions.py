class ConnectorError(Exception):
    """Base error for the connector."""


class UnhealthyConnectionError(ConnectorError):
    """Raised by start() when the upstream or downstream link is down."""

    def __init__(self, upstream_up: bool, downstream_up: bool) -> None:
        self.upstream_up = upstream_up
        self.downstream_up = downstream_up
        down = [
            name
            for name, up in (("upstream", upstream_up), ("downstream", downstream_up))
            if not up
        ]
        super().__init__(f"Connection not healthy: {', '.join(down)} down")
