"""Observability – structured logging helpers."""
from hms_push.observability.factory import configure_logging, get_logger
from hms_push.observability.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
