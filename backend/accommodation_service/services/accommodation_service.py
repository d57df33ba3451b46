"""Accommodation service: create, read, update and soft-delete listings.

Every function takes the request-scoped session and only flushes; the
``get_db`` dependency commits once the request succeeds and rolls back
otherwise, so a failing call never leaves partial state behind.
"""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from accommodation_service import mappers
from accommodation_service.auth.dependencies import UserContext
from accommodation_service.exceptions import AccommodationNotFoundError, ForbiddenError, InvalidCapacityError
from accommodation_service.models.accommodation import Accommodation, Amenity, AmenityType
from accommodation_service.schemas.accommodation import (
    AccommodationCreate,
    AccommodationResponse,
    AccommodationUpdate,
)

logger = logging.getLogger(__name__)


def validate_guest_capacity(min_guests: int, max_guests: int) -> None:
    """Raise :class:`InvalidCapacityError` unless ``min_guests <= max_guests``."""
    if min_guests > max_guests:
        raise InvalidCapacityError(
            f"Minimum guests ({min_guests}) cannot exceed maximum guests ({max_guests})"
        )


def _validate_ownership(accommodation: Accommodation, caller: UserContext) -> None:
    if accommodation.host_id != caller.user_id:
        logger.warning(
            "User %s attempted to modify accommodation %s owned by %s",
            caller.user_id,
            accommodation.id,
            accommodation.host_id,
        )
        raise ForbiddenError("You are not the owner of this accommodation")


def _attach_amenities(accommodation: Accommodation, types: set[AmenityType]) -> None:
    for amenity_type in types:
        accommodation.amenities.append(Amenity(type=amenity_type))


async def _get_accommodation_or_raise(db: AsyncSession, accommodation_id: uuid.UUID) -> Accommodation:
    # A query rather than db.get(): the identity map would hand back rows
    # soft-deleted earlier in the same session.
    result = await db.execute(select(Accommodation).where(Accommodation.id == accommodation_id))
    accommodation = result.scalar_one_or_none()
    if accommodation is None:
        raise AccommodationNotFoundError(f"Accommodation not found with id: {accommodation_id}")
    return accommodation


async def create_accommodation(
    db: AsyncSession, request: AccommodationCreate, caller: UserContext
) -> AccommodationResponse:
    """Create an accommodation owned by ``caller`` with its initial amenities."""
    validate_guest_capacity(request.min_guests, request.max_guests)

    accommodation = mappers.to_entity(request)
    accommodation.host_id = caller.user_id
    _attach_amenities(accommodation, request.amenities or set())

    db.add(accommodation)
    await db.flush()
    await db.refresh(accommodation)

    logger.info("Created accommodation %s for host %s", accommodation.id, caller.user_id)
    return mappers.to_response(accommodation)


async def get_accommodation(db: AsyncSession, accommodation_id: uuid.UUID) -> AccommodationResponse:
    """Return a visible accommodation by id."""
    accommodation = await _get_accommodation_or_raise(db, accommodation_id)
    return mappers.to_response(accommodation)


async def list_host_accommodations(db: AsyncSession, host_id: uuid.UUID) -> list[AccommodationResponse]:
    """Return every visible accommodation owned by ``host_id``, newest first."""
    result = await db.execute(
        select(Accommodation)
        .where(Accommodation.host_id == host_id)
        .order_by(Accommodation.created_at.desc())
    )
    return mappers.to_response_list(result.scalars().all())


async def update_accommodation(
    db: AsyncSession,
    accommodation_id: uuid.UUID,
    request: AccommodationUpdate,
    caller: UserContext,
) -> AccommodationResponse:
    """Apply a partial update. Only fields present in ``request`` are changed.

    The capacity rule is checked against the merged values before anything
    is written, so a rejected update leaves the entity untouched.
    """
    accommodation = await _get_accommodation_or_raise(db, accommodation_id)
    _validate_ownership(accommodation, caller)

    changes = request.model_dump(exclude_unset=True, exclude_none=True, exclude={"amenities"})
    validate_guest_capacity(
        changes.get("min_guests", accommodation.min_guests),
        changes.get("max_guests", accommodation.max_guests),
    )

    for field, value in changes.items():
        setattr(accommodation, field, value)

    if request.amenities is not None:
        # Old rows must be gone before the new ones hit the unique constraint.
        accommodation.amenities.clear()
        await db.flush()
        _attach_amenities(accommodation, request.amenities)
        # Amenity rows live in their own table, so touch the parent explicitly.
        accommodation.updated_at = func.now()

    await db.flush()
    await db.refresh(accommodation)

    logger.info(
        "Updated accommodation %s: fields=%s, amenities_replaced=%s",
        accommodation.id,
        sorted(changes),
        request.amenities is not None,
    )
    return mappers.to_response(accommodation)


async def delete_accommodation(db: AsyncSession, accommodation_id: uuid.UUID, caller: UserContext) -> None:
    """Soft-delete an accommodation and all of its amenities."""
    accommodation = await _get_accommodation_or_raise(db, accommodation_id)
    _validate_ownership(accommodation, caller)

    accommodation.is_deleted = True
    for amenity in accommodation.amenities:
        amenity.is_deleted = True
    await db.flush()

    logger.info("Soft-deleted accommodation %s (host %s)", accommodation.id, accommodation.host_id)
