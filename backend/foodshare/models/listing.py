import enum

from sqlalchemy import Column, String, Date, Text, ForeignKey, Uuid

from foodshare.database import Base, BaseMixin


class ListingStatus(str, enum.Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


FOOD_CATEGORIES = (
    "Produce",
    "Dairy",
    "Bakery",
    "Prepared Meals",
    "Canned Goods",
    "Frozen",
    "Beverages",
    "Other",
)


class FoodListing(BaseMixin, Base):
    __tablename__ = "food_listings"

    donor_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False, index=True)
    quantity = Column(String, nullable=False)
    expiry_date = Column(Date)
    pickup_location = Column(String, nullable=False)
    pickup_instructions = Column(Text)
    status = Column(String, nullable=False, default=ListingStatus.AVAILABLE.value, index=True)
    image_url = Column(String)
