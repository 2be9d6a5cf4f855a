"""Error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   ├── ConfigError
    │   │   ├── MissingRequiredSettingError
    │   │   └── InvalidSettingValueError
    │   └── RefreshTokenError
    └── InfrastructureError      (infrastructure.py)
        ├── TransportError
        │   ├── UnsupportedMethodError
        │   ├── ProxyURLError
        │   ├── NetworkError
        │   └── BodyDrainError
        └── SerializationError
"""

from hms_push.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RefreshTokenError,
)
from hms_push.errors.base import BaseError
from hms_push.errors.domain import DomainError, ValidationError
from hms_push.errors.infrastructure import (
    BodyDrainError,
    InfrastructureError,
    NetworkError,
    ProxyURLError,
    SerializationError,
    TransportError,
    UnsupportedMethodError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BodyDrainError",
    "ConfigError",
    "DomainError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "NetworkError",
    "ProxyURLError",
    "RefreshTokenError",
    "SerializationError",
    "TransportError",
    "UnsupportedMethodError",
    "ValidationError",
]
