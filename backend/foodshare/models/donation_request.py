import enum

from sqlalchemy import Column, String, Text, ForeignKey, Uuid

from foodshare.database import Base, BaseMixin


class Urgency(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RequestStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"  # valid, but nothing moves a request here
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


class DonationRequest(BaseMixin, Base):
    __tablename__ = "donation_requests"

    recipient_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True)
    listing_id = Column(Uuid(as_uuid=True), ForeignKey("food_listings.id"), nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    quantity_needed = Column(String, nullable=False)
    urgency = Column(String, nullable=False, default=Urgency.MEDIUM.value)
    status = Column(String, nullable=False, default=RequestStatus.OPEN.value, index=True)
