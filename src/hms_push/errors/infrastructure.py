"""Infrastructure errors – HTTP I/O and payload (de)serialisation."""

from __future__ import annotations

from typing import Any

from hms_push.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a message rule violation."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """Sending an HTTP request failed."""

    default_code = "transport_error"


class UnsupportedMethodError(TransportError):
    """Only ``GET`` and ``POST`` requests are supported."""

    default_code = "unsupported_method"

    def __init__(self, method: str, **kwargs: Any) -> None:
        super().__init__(f"not found method: {method!r}", **kwargs)
        self.method = method


class ProxyURLError(TransportError):
    """The configured proxy URL could not be parsed."""

    default_code = "invalid_proxy_url"

    def __init__(self, proxy_url: str, **kwargs: Any) -> None:
        super().__init__(f"fail parse proxy url: {proxy_url!r}", **kwargs)
        self.proxy_url = proxy_url


class NetworkError(TransportError):
    """The request never produced an HTTP response (connect, read, TLS, ...)."""

    default_code = "network_error"

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Network failure calling '{url}'", **kwargs)
        self.url = url


class BodyDrainError(TransportError):
    """A retryable response body could not be drained before the next attempt."""

    default_code = "body_drain_failed"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "BodyDrainError",
    "InfrastructureError",
    "NetworkError",
    "ProxyURLError",
    "SerializationError",
    "TransportError",
    "UnsupportedMethodError",
]
