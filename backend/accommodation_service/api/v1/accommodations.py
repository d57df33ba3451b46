"""Accommodation CRUD API routes: reads are public, writes are host-only."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from accommodation_service.api.deps import UserContext, UserRole, get_db, require_role
from accommodation_service.exceptions import AccommodationNotFoundError, ForbiddenError, InvalidCapacityError
from accommodation_service.schemas.accommodation import (
    AccommodationCreate,
    AccommodationResponse,
    AccommodationUpdate,
)
from accommodation_service.schemas.common import MessageResponse
from accommodation_service.services import accommodation_service

router = APIRouter(prefix="/accommodation", tags=["accommodation"])

require_host = require_role(UserRole.HOST)


def _not_found(exc: AccommodationNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _forbidden(exc: ForbiddenError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))


def _invalid_capacity(exc: InvalidCapacityError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get(
    "/test",
    response_model=MessageResponse,
    summary="Check that the accommodation API is reachable",
)
async def ping() -> MessageResponse:
    return MessageResponse(message="Accommodation Service is up and running!")


@router.post(
    "",
    response_model=AccommodationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new accommodation",
)
async def create_accommodation(
    body: AccommodationCreate,
    db: AsyncSession = Depends(get_db),
    caller: UserContext = Depends(require_host),
) -> AccommodationResponse:
    """Create an accommodation owned by the calling host."""
    try:
        return await accommodation_service.create_accommodation(db, body, caller)
    except InvalidCapacityError as exc:
        raise _invalid_capacity(exc) from exc


@router.get(
    "/host/{host_id}",
    response_model=list[AccommodationResponse],
    summary="List accommodations owned by a host",
)
async def list_host_accommodations(
    host_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> list[AccommodationResponse]:
    """Return all visible accommodations of a host. Empty list if none."""
    return await accommodation_service.list_host_accommodations(db, host_id)


@router.get(
    "/{accommodation_id}",
    response_model=AccommodationResponse,
    summary="Get an accommodation by ID",
)
async def get_accommodation(
    accommodation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    """Retrieve a single accommodation. Returns 404 if missing or deleted."""
    try:
        return await accommodation_service.get_accommodation(db, accommodation_id)
    except AccommodationNotFoundError as exc:
        raise _not_found(exc) from exc


@router.put(
    "/{accommodation_id}",
    response_model=AccommodationResponse,
    summary="Update an accommodation",
)
async def update_accommodation(
    accommodation_id: uuid.UUID,
    body: AccommodationUpdate,
    db: AsyncSession = Depends(get_db),
    caller: UserContext = Depends(require_host),
) -> AccommodationResponse:
    """Partially update an accommodation. Only explicitly set fields are changed."""
    try:
        return await accommodation_service.update_accommodation(db, accommodation_id, body, caller)
    except AccommodationNotFoundError as exc:
        raise _not_found(exc) from exc
    except ForbiddenError as exc:
        raise _forbidden(exc) from exc
    except InvalidCapacityError as exc:
        raise _invalid_capacity(exc) from exc


@router.delete(
    "/{accommodation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an accommodation",
)
async def delete_accommodation(
    accommodation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    caller: UserContext = Depends(require_host),
) -> None:
    """Soft-delete an accommodation and its amenities."""
    try:
        await accommodation_service.delete_accommodation(db, accommodation_id, caller)
    except AccommodationNotFoundError as exc:
        raise _not_found(exc) from exc
    except ForbiddenError as exc:
        raise _forbidden(exc) from exc
