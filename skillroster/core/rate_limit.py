"""
Rate limiting with slowapi.

Login and registration are keyed on client IP plus the submitted username,
so guessing passwords for one account is throttled without locking out other
users behind the same address. Storage is in-memory unless
RATE_LIMIT_STORAGE_URI points somewhere shared.
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from skillroster.core.config import settings

RATE_AUTH = "5/minute"


async def remember_login_username(request: Request) -> None:
    """
    Route dependency stashing the body's username for the limiter key.

    The body is cached on the request, so the endpoint still gets to parse it.
    """
    try:
        body = await request.json()
    except ValueError:
        return
    if isinstance(body, dict) and isinstance(body.get("username"), str):
        request.state.login_username = body["username"]


def rate_limit_key(request: Request) -> str:
    """Authenticated user ID, else ``<ip>:<username>`` on auth routes, else the IP."""
    user = getattr(request.state, "current_user", None)
    if user is not None:
        return str(user.id)

    address = get_remote_address(request)
    username = getattr(request.state, "login_username", None)
    if username:
        return f"{address}:{username.lower()}"
    return address


limiter = Limiter(
    key_func=rate_limit_key,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)
