from datetime import datetime
from typing import Literal
from uuid import UUID
from pydantic import BaseModel, Field, computed_field

from foodshare.models.donation_request import RequestStatus, Urgency
from foodshare.models.listing import FOOD_CATEGORIES
from foodshare.schemas.listing import Category


class DonationRequestCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: Category = FOOD_CATEGORIES[0]
    quantity_needed: str = Field(min_length=1)
    urgency: Urgency = Urgency.MEDIUM
    listing_id: UUID | None = None


class DonationRequestResponse(BaseModel):
    id: UUID
    recipient_id: UUID
    listing_id: UUID | None
    title: str
    description: str
    category: str
    quantity_needed: str
    urgency: Urgency
    status: RequestStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def actions(self) -> list[Literal["fulfill", "cancel"]]:
        if self.status == RequestStatus.OPEN:
            return ["fulfill", "cancel"]
        return []
