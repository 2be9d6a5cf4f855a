"""
hms_push – async client SDK for HUAWEI Push Kit.

Import path convention::

    from hms_push import HuaweiPushClient
    from hms_push.messaging import PushRequest, Message, AndroidConfig
    from hms_push.errors import ValidationError, RefreshTokenError
    from hms_push.resilience import CancellationToken
"""

from hms_push.client import HuaweiPushClient
from hms_push.config import PushSettings
from hms_push.messaging import PushRequest, PushResponse, ResponseCode
from hms_push.resilience import CancellationToken

__version__ = "0.1.0"
__all__ = [
    "CancellationToken",
    "HuaweiPushClient",
    "PushRequest",
    "PushResponse",
    "PushSettings",
    "ResponseCode",
    "__version__",
]
