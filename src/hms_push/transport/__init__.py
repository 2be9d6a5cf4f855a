"""Transport – HTTP request values, the Transporter port and the httpx adapter."""
from hms_push.transport.httpx_transport import RESP_READ_LIMIT, HttpxTransport, parse_proxy_url
from hms_push.transport.policy import RetryPolicy, is_retryable_status
from hms_push.transport.port import Transporter
from hms_push.transport.request import METHOD_GET, METHOD_POST, HttpRequest, HttpResponse

__all__ = [
    "METHOD_GET",
    "METHOD_POST",
    "RESP_READ_LIMIT",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "RetryPolicy",
    "Transporter",
    "is_retryable_status",
    "parse_proxy_url",
]
