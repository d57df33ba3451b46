"""Seed the database with demo accommodations for local development.

All listings belong to a fixed demo host, so the frontend team can hit
``GET /api/accommodation/host/<DEMO_HOST_ID>`` right away and send writes
with the headers ``X-User-Id: <DEMO_HOST_ID>`` and ``X-User-Role: HOST``.

Run inside Docker:
    docker compose exec backend python -m scripts.seed_data
"""

import asyncio
import sys
import uuid
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from accommodation_service.auth.dependencies import UserContext, UserRole
from accommodation_service.database import async_session_factory
from accommodation_service.models.accommodation import Accommodation, Amenity
from accommodation_service.schemas.accommodation import AccommodationCreate, AccommodationResponse
from accommodation_service.services.accommodation_service import create_accommodation

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

DEMO_HOST_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")

ACCOMMODATIONS = [
    {
        "name": "Le Ayu Villa Canggu",
        "address": "Jl. Raya Tumbak Bayuh, Pererenan, Canggu, Bali",
        "min_guests": 1,
        "max_guests": 4,
        "pricing_mode": "PER_UNIT",
        "approval_mode": "AUTOMATIC",
        "amenities": ["POOL", "WIFI", "AC", "KITCHEN", "BALCONY", "TV", "PARKING"],
    },
    {
        "name": "Pitu Village Escape",
        "address": "Banjar Punggul, Sangeh, Ubud, Bali",
        "min_guests": 1,
        "max_guests": 2,
        "pricing_mode": "PER_GUEST",
        "approval_mode": "MANUAL",
        "amenities": ["POOL", "WIFI", "BALCONY", "PARKING"],
    },
    {
        "name": "Da Vinci Villa by Nagisa",
        "address": "Jl. Pantai Batu Bolong, Canggu, Bali",
        "min_guests": 2,
        "max_guests": 8,
        "pricing_mode": "PER_UNIT",
        "approval_mode": "MANUAL",
        "amenities": ["POOL", "WIFI", "AC", "KITCHEN", "PARKING", "WASHER"],
    },
    {
        "name": "Umah Anyar Villas Ubud",
        "address": "Jl. Raya Goa Gajah, Bedahulu, Ubud, Bali",
        "min_guests": 1,
        "max_guests": 2,
        "pricing_mode": "PER_GUEST",
        "approval_mode": "AUTOMATIC",
        "amenities": ["POOL", "WIFI", "AC", "PARKING"],
    },
    {
        "name": "Capung Asri Eco Resort",
        "address": "Jl. Raya Bedahulu, Ubud, Bali",
        "min_guests": 2,
        "max_guests": 4,
        "pricing_mode": "PER_GUEST",
        "approval_mode": "MANUAL",
        "amenities": ["POOL", "WIFI", "AC", "PETS_ALLOWED"],
    },
]


async def seed_accommodations(session: AsyncSession) -> list[AccommodationResponse]:
    """Replace all demo-host accommodations with the ones defined above.

    Rows from earlier runs are removed physically, soft-deleted ones included,
    then every listing is created through the service so the usual
    validation applies.
    """
    demo_ids = select(Accommodation.id).where(Accommodation.host_id == DEMO_HOST_ID)
    await session.execute(delete(Amenity).where(Amenity.accommodation_id.in_(demo_ids)))
    await session.execute(delete(Accommodation).where(Accommodation.host_id == DEMO_HOST_ID))
    await session.flush()

    host = UserContext(user_id=DEMO_HOST_ID, role=UserRole.HOST.value)
    created: list[AccommodationResponse] = []
    for data in ACCOMMODATIONS:
        created.append(await create_accommodation(session, AccommodationCreate(**data), host))
    return created


async def seed() -> None:
    """Populate the database with demo accommodations and commit."""
    async with async_session_factory() as session:
        created = await seed_accommodations(session)
        await session.commit()

    print(f"✅ Created {len(created)} accommodations for demo host {DEMO_HOST_ID}")
    for accommodation in created:
        print(
            f"   🏠 {accommodation.name}, {accommodation.min_guests}-{accommodation.max_guests} guests, "
            f"{accommodation.pricing_mode.value}, {len(accommodation.amenities)} amenities"
        )


if __name__ == "__main__":
    asyncio.run(seed())
