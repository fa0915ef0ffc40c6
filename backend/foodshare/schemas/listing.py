from datetime import date, datetime
from typing import Annotated, Literal
from uuid import UUID
from pydantic import AfterValidator, BaseModel, Field, computed_field, field_validator

from foodshare.models.listing import ListingStatus, FOOD_CATEGORIES


def _known_category(value: str) -> str:
    if value not in FOOD_CATEGORIES:
        raise ValueError(f"category must be one of: {', '.join(FOOD_CATEGORIES)}")
    return value


def _not_past(value: date) -> date:
    if value < date.today():
        raise ValueError("expiry_date cannot be in the past")
    return value


Category = Annotated[str, AfterValidator(_known_category)]
ExpiryDate = Annotated[date, AfterValidator(_not_past)]


class FoodListingCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: Category = FOOD_CATEGORIES[0]
    quantity: str = Field(min_length=1)
    expiry_date: ExpiryDate | None = None
    pickup_location: str = Field(min_length=1)
    pickup_instructions: str | None = None


class FoodListingUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    category: Category | None = None
    quantity: str | None = Field(default=None, min_length=1)
    expiry_date: ExpiryDate | None = None
    pickup_location: str | None = Field(default=None, min_length=1)
    pickup_instructions: str | None = None

    @field_validator("title", "description", "category", "quantity", "pickup_location", mode="before")
    @classmethod
    def required_columns_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be cleared")
        return v


class FoodListingResponse(BaseModel):
    id: UUID
    donor_id: UUID
    title: str
    description: str
    category: str
    quantity: str
    expiry_date: date | None
    pickup_location: str
    pickup_instructions: str | None
    status: ListingStatus
    image_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def actions(self) -> list[Literal["complete", "cancel"]]:
        """Donor transitions currently offered; only an available listing has any."""
        if self.status == ListingStatus.AVAILABLE:
            return ["complete", "cancel"]
        return []
