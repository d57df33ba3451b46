"""FastAPI dependencies for caller identity and role gating.

Authentication happens upstream: the gateway forwards the caller's user id
and role as request headers. These dependencies only read and check them,
handing the service layer a plain :class:`UserContext`.
"""

import enum
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException, status

from accommodation_service.config import settings
from accommodation_service.exceptions import RoleNotPermittedError, UnauthenticatedError

logger = logging.getLogger(__name__)


class UserRole(str, enum.Enum):
    HOST = "HOST"
    GUEST = "GUEST"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class UserContext:
    """Identity of the caller making the current request."""

    user_id: uuid.UUID
    role: str


def resolve_user_context(user_id: str | None, role: str | None) -> UserContext:
    """Build a :class:`UserContext` from raw header values.

    Raises:
        UnauthenticatedError: If either value is missing or the user id is not a UUID.
    """
    if not user_id or not role:
        raise UnauthenticatedError("Missing user identity headers")
    try:
        parsed_id = uuid.UUID(user_id)
    except ValueError:
        raise UnauthenticatedError("Malformed user id header") from None
    return UserContext(user_id=parsed_id, role=role)


def check_role(context: UserContext, allowed: frozenset[str]) -> UserContext:
    """Return ``context`` if its role is one of ``allowed``.

    Raises:
        RoleNotPermittedError: If the role is not allowed.
    """
    if context.role not in allowed:
        raise RoleNotPermittedError(f"Role {context.role!r} is not permitted")
    return context


async def get_user_context(
    user_id: str | None = Header(None, alias=settings.user_id_header),
    role: str | None = Header(None, alias=settings.user_role_header),
) -> UserContext:
    """Extract the caller identity from the request headers.

    Raises:
        HTTPException 401: If a header is missing or the user id is malformed.
    """
    try:
        return resolve_user_context(user_id, role)
    except UnauthenticatedError as exc:
        logger.warning("Rejected request without valid identity: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


def require_role(*roles: UserRole | str) -> Callable[..., Awaitable[UserContext]]:
    """Dependency factory that only lets callers with one of ``roles`` through.

    Usage::

        @router.post("")
        async def create(caller: UserContext = Depends(require_role(UserRole.HOST))):
            ...
    """
    allowed = frozenset(role.value if isinstance(role, UserRole) else role for role in roles)

    async def _dependency(context: UserContext = Depends(get_user_context)) -> UserContext:
        try:
            return check_role(context, allowed)
        except RoleNotPermittedError as exc:
            logger.warning("User %s denied: %s", context.user_id, exc)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=str(exc),
            ) from exc

    return _dependency
