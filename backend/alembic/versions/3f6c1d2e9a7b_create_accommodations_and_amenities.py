"""create_accommodations_and_amenities

Revision ID: 3f6c1d2e9a7b
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f6c1d2e9a7b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

pricing_mode = sa.Enum("PER_GUEST", "PER_UNIT", name="pricing_mode")
approval_mode = sa.Enum("MANUAL", "AUTOMATIC", name="approval_mode")
amenity_type = sa.Enum(
    "WIFI", "PARKING", "AC", "KITCHEN", "POOL", "HEATING", "TV", "WASHER", "PETS_ALLOWED", "BALCONY",
    name="amenity_type",
)


def upgrade() -> None:
    op.create_table(
        "accommodations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("host_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("min_guests", sa.Integer(), nullable=False),
        sa.Column("max_guests", sa.Integer(), nullable=False),
        sa.Column("pricing_mode", pricing_mode, nullable=False),
        sa.Column("approval_mode", approval_mode, nullable=False),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accommodations_host_id", "accommodations", ["host_id"])

    op.create_table(
        "amenities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("accommodation_id", sa.UUID(), nullable=False),
        sa.Column("type", amenity_type, nullable=False),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["accommodation_id"], ["accommodations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("accommodation_id", "type", name="uq_amenities_accommodation_type"),
    )
    op.create_index("ix_amenities_accommodation_id", "amenities", ["accommodation_id"])


def downgrade() -> None:
    op.drop_index("ix_amenities_accommodation_id", table_name="amenities")
    op.drop_table("amenities")
    op.drop_index("ix_accommodations_host_id", table_name="accommodations")
    op.drop_table("accommodations")

    # Postgres keeps enum types around after their tables are dropped
    bind = op.get_bind()
    amenity_type.drop(bind, checkfirst=True)
    approval_mode.drop(bind, checkfirst=True)
    pricing_mode.drop(bind, checkfirst=True)
