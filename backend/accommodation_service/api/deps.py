"""Shared API dependencies: single import point for all routers.

Re-exports database session and caller identity dependencies so that router
modules can import everything they need from one place::

    from accommodation_service.api.deps import get_db, require_role
"""

from accommodation_service.auth.dependencies import (
    UserContext,
    UserRole,
    get_user_context,
    require_role,
)
from accommodation_service.database import get_db

__all__ = [
    "get_db",
    "get_user_context",
    "require_role",
    "UserContext",
    "UserRole",
]
