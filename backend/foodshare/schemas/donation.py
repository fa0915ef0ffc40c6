from datetime import datetime
from uuid import UUID
from pydantic import BaseModel

from foodshare.models.donation import DonationStatus


class DonationResponse(BaseModel):
    id: UUID
    listing_id: UUID
    donor_id: UUID
    recipient_id: UUID
    request_id: UUID | None
    quantity: str
    status: DonationStatus
    pickup_date: datetime | None
    delivery_date: datetime | None
    impact_notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ReservationResponse(BaseModel):
    """Outcome of a recipient requesting a listing."""

    donation: DonationResponse
    listing_status: str
