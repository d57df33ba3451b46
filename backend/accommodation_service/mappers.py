"""Conversions between request schemas, ORM entities and response schemas."""

from collections.abc import Iterable

from accommodation_service.models.accommodation import Accommodation, AmenityType
from accommodation_service.schemas.accommodation import AccommodationCreate, AccommodationResponse


def to_entity(request: AccommodationCreate) -> Accommodation:
    """Build an unsaved accommodation from a create request.

    Server-assigned fields (id, host, timestamps, delete flag) and amenities
    are left for the service to fill in.
    """
    return Accommodation(**request.model_dump(exclude={"amenities"}))


def amenity_types(accommodation: Accommodation) -> list[AmenityType]:
    return [amenity.type for amenity in accommodation.amenities]


def to_response(accommodation: Accommodation) -> AccommodationResponse:
    return AccommodationResponse(
        id=accommodation.id,
        host_id=accommodation.host_id,
        name=accommodation.name,
        address=accommodation.address,
        min_guests=accommodation.min_guests,
        max_guests=accommodation.max_guests,
        pricing_mode=accommodation.pricing_mode,
        approval_mode=accommodation.approval_mode,
        amenities=amenity_types(accommodation),
        created_at=accommodation.created_at,
        updated_at=accommodation.updated_at,
    )


def to_response_list(accommodations: Iterable[Accommodation]) -> list[AccommodationResponse]:
    return [to_response(accommodation) for accommodation in accommodations]
