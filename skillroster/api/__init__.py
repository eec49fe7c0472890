"""
API package.
"""
from skillroster.api.routes import api_router
from skillroster.api.deps import get_current_user, get_path_owner

__all__ = [
    "api_router",
    "get_current_user",
    "get_path_owner",
]
