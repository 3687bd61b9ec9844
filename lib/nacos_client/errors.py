from __future__ import annotations


class NacosClientError(Exception):
    """Base client error."""


class TransportError(NacosClientError):
    """Connection failure, timeout or non-2xx reply from the config server."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: str | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.method = method
        self.path = path
