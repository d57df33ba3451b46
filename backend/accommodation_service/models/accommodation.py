"""Accommodation model and its amenity children."""

import enum
import uuid

from sqlalchemy import Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from accommodation_service.database import Base, SoftDeleteMixin, TimestampMixin, UUIDPrimaryKeyMixin


class PricingMode(str, enum.Enum):
    PER_GUEST = "PER_GUEST"
    PER_UNIT = "PER_UNIT"


class ApprovalMode(str, enum.Enum):
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"


class AmenityType(str, enum.Enum):
    WIFI = "WIFI"
    PARKING = "PARKING"
    AC = "AC"
    KITCHEN = "KITCHEN"
    POOL = "POOL"
    HEATING = "HEATING"
    TV = "TV"
    WASHER = "WASHER"
    PETS_ALLOWED = "PETS_ALLOWED"
    BALCONY = "BALCONY"


class Accommodation(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A listing a host offers for booking."""

    __tablename__ = "accommodations"

    host_id: Mapped[uuid.UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    min_guests: Mapped[int] = mapped_column(nullable=False)
    max_guests: Mapped[int] = mapped_column(nullable=False)
    pricing_mode: Mapped[PricingMode] = mapped_column(
        Enum(PricingMode, name="pricing_mode"), nullable=False
    )
    approval_mode: Mapped[ApprovalMode] = mapped_column(
        Enum(ApprovalMode, name="approval_mode"), nullable=False
    )

    # Relationships
    amenities: Mapped[list["Amenity"]] = relationship(
        back_populates="accommodation",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Accommodation(id={self.id}, name={self.name!r}, host_id={self.host_id})>"


class Amenity(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A feature attached to exactly one accommodation."""

    __tablename__ = "amenities"
    __table_args__ = (UniqueConstraint("accommodation_id", "type", name="uq_amenities_accommodation_type"),)

    accommodation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[AmenityType] = mapped_column(Enum(AmenityType, name="amenity_type"), nullable=False)

    accommodation: Mapped["Accommodation"] = relationship(back_populates="amenities")

    def __repr__(self) -> str:
        return f"<Amenity(id={self.id}, type={self.type.value})>"
