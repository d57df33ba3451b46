"""Tests for the development seed script."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from accommodation_service.models.accommodation import Accommodation
from accommodation_service.services.accommodation_service import list_host_accommodations
from scripts.seed_data import ACCOMMODATIONS, DEMO_HOST_ID, seed_accommodations


async def test_seed_creates_demo_listings(db_session: AsyncSession):
    created = await seed_accommodations(db_session)

    assert len(created) == len(ACCOMMODATIONS)
    assert all(item.host_id == DEMO_HOST_ID for item in created)
    assert all(item.min_guests <= item.max_guests for item in created)


async def test_reseeding_replaces_previous_rows(session_factory: async_sessionmaker[AsyncSession]):
    async with session_factory() as session:
        await seed_accommodations(session)
        await session.commit()

    async with session_factory() as session:
        await seed_accommodations(session)
        await session.commit()

    async with session_factory() as session:
        listed = await list_host_accommodations(session, DEMO_HOST_ID)
        assert len(listed) == len(ACCOMMODATIONS)

        everything = await session.execute(
            select(Accommodation).where(Accommodation.host_id == DEMO_HOST_ID).execution_options(include_deleted=True)
        )
        assert len(everything.scalars().all()) == len(ACCOMMODATIONS)
