"""Auth – OAuth2 client-credentials token lifecycle."""
from hms_push.auth.manager import DEFAULT_REFRESH_INTERVAL, DEFAULT_RETRY_DELAY, TokenManager
from hms_push.auth.token import AccessToken

__all__ = ["DEFAULT_REFRESH_INTERVAL", "DEFAULT_RETRY_DELAY", "AccessToken", "TokenManager"]
