import enum

from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Uuid

from foodshare.database import Base, BaseMixin


class DonationStatus(str, enum.Enum):
    PENDING = "pending"
    # in_transit and delivered are kept for the delivery lifecycle; no code path sets them yet
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class Donation(BaseMixin, Base):
    """Links a reserved listing to the recipient who requested it."""

    __tablename__ = "donations"

    listing_id = Column(Uuid(as_uuid=True), ForeignKey("food_listings.id"), nullable=False, index=True)
    donor_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True)
    recipient_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True)
    request_id = Column(Uuid(as_uuid=True), ForeignKey("donation_requests.id"), nullable=True)
    quantity = Column(String, nullable=False)
    status = Column(String, nullable=False, default=DonationStatus.PENDING.value)
    pickup_date = Column(DateTime(timezone=True))
    delivery_date = Column(DateTime(timezone=True))
    impact_notes = Column(Text)
