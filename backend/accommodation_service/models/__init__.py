"""SQLAlchemy models for the Accommodation Service.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from accommodation_service.models.accommodation import (
    Accommodation,
    Amenity,
    AmenityType,
    ApprovalMode,
    PricingMode,
)

__all__ = [
    "Accommodation",
    "Amenity",
    "AmenityType",
    "ApprovalMode",
    "PricingMode",
]
