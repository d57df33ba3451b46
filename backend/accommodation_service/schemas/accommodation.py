"""Pydantic v2 request/response schemas for accommodation endpoints.

Request schemas carry the structural checks (required fields, bounds).
Cross-field rules such as ``min_guests <= max_guests`` live in the service,
which checks them after partial updates are merged.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from accommodation_service.models.accommodation import AmenityType, ApprovalMode, PricingMode

# Largest value a 32-bit INTEGER column can hold.
MAX_GUESTS = 2_147_483_647

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class AccommodationCreate(BaseModel):
    """Schema for creating a new accommodation."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=512)
    min_guests: int = Field(..., ge=1, le=MAX_GUESTS)
    max_guests: int = Field(..., ge=1, le=MAX_GUESTS)
    pricing_mode: PricingMode
    approval_mode: ApprovalMode
    amenities: set[AmenityType] | None = None


class AccommodationUpdate(BaseModel):
    """Schema for partially updating an accommodation. All fields optional.

    A field that is omitted or ``null`` leaves the stored value unchanged.
    ``amenities`` replaces the whole set when given, an empty list clears it.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1, max_length=512)
    min_guests: int | None = Field(None, ge=1, le=MAX_GUESTS)
    max_guests: int | None = Field(None, ge=1, le=MAX_GUESTS)
    pricing_mode: PricingMode | None = None
    approval_mode: ApprovalMode | None = None
    amenities: set[AmenityType] | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccommodationResponse(BaseModel):
    """Public accommodation information returned from the API."""

    id: uuid.UUID
    host_id: uuid.UUID
    name: str
    address: str
    min_guests: int
    max_guests: int
    pricing_mode: PricingMode
    approval_mode: ApprovalMode
    amenities: list[AmenityType] = []
    created_at: datetime
    updated_at: datetime
