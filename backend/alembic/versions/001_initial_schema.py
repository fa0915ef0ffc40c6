"""Initial schema — profiles, listings, requests, donations, waste analytics

Revision ID: 001
Revises:
Create Date: 2025-01-01 00:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # --- profiles ---
    op.create_table(
        "profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String, unique=True, index=True, nullable=False),
        sa.Column("full_name", sa.String, nullable=False),
        sa.Column("role", sa.String, nullable=False, index=True),
        sa.Column("organization_name", sa.String),
        sa.Column("phone", sa.String),
        sa.Column("address", sa.Text),
        *_timestamps(),
        sa.CheckConstraint("role IN ('admin', 'donor', 'recipient', 'analyst')", name="ck_profiles_role"),
    )

    # --- food_listings ---
    op.create_table(
        "food_listings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("donor_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id"), nullable=False, index=True),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String, nullable=False, index=True),
        sa.Column("quantity", sa.String, nullable=False),
        sa.Column("expiry_date", sa.Date),
        sa.Column("pickup_location", sa.String, nullable=False),
        sa.Column("pickup_instructions", sa.Text),
        sa.Column("status", sa.String, nullable=False, server_default="available", index=True),
        sa.Column("image_url", sa.String),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('available', 'reserved', 'completed', 'cancelled')",
            name="ck_food_listings_status",
        ),
    )

    # --- donation_requests ---
    op.create_table(
        "donation_requests",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("recipient_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id"), nullable=False, index=True),
        sa.Column("listing_id", UUID(as_uuid=True), sa.ForeignKey("food_listings.id"), nullable=True),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String, nullable=False),
        sa.Column("quantity_needed", sa.String, nullable=False),
        sa.Column("urgency", sa.String, nullable=False, server_default="medium"),
        sa.Column("status", sa.String, nullable=False, server_default="open", index=True),
        *_timestamps(),
        sa.CheckConstraint("urgency IN ('low', 'medium', 'high', 'critical')", name="ck_donation_requests_urgency"),
        sa.CheckConstraint(
            "status IN ('open', 'in_progress', 'fulfilled', 'cancelled')",
            name="ck_donation_requests_status",
        ),
    )

    # --- donations ---
    op.create_table(
        "donations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("listing_id", UUID(as_uuid=True), sa.ForeignKey("food_listings.id"), nullable=False, index=True),
        sa.Column("donor_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id"), nullable=False, index=True),
        sa.Column("recipient_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id"), nullable=False, index=True),
        sa.Column("request_id", UUID(as_uuid=True), sa.ForeignKey("donation_requests.id"), nullable=True),
        sa.Column("quantity", sa.String, nullable=False),
        sa.Column("status", sa.String, nullable=False, server_default="pending"),
        sa.Column("pickup_date", sa.DateTime(timezone=True)),
        sa.Column("delivery_date", sa.DateTime(timezone=True)),
        sa.Column("impact_notes", sa.Text),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('pending', 'in_transit', 'delivered', 'cancelled')",
            name="ck_donations_status",
        ),
    )

    # --- waste_analytics ---
    op.create_table(
        "waste_analytics",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("listing_id", UUID(as_uuid=True), sa.ForeignKey("food_listings.id"), nullable=True),
        sa.Column("donation_id", UUID(as_uuid=True), sa.ForeignKey("donations.id"), nullable=True),
        sa.Column("food_saved_kg", sa.Float, nullable=False, server_default="0"),
        sa.Column("meals_provided", sa.Integer, nullable=False, server_default="0"),
        sa.Column("co2_saved_kg", sa.Float, nullable=False, server_default="0"),
        sa.Column("category", sa.String),
        sa.Column("date", sa.Date),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("waste_analytics")
    op.drop_table("donations")
    op.drop_table("donation_requests")
    op.drop_table("food_listings")
    op.drop_table("profiles")
