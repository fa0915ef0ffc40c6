import uuid

from sqlalchemy import Column, String, Integer, Float, Date, DateTime, ForeignKey, Uuid

from foodshare.database import Base, utcnow


class WasteAnalytic(Base):
    """Impact record written by an external process; read-only for this service."""

    __tablename__ = "waste_analytics"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    listing_id = Column(Uuid(as_uuid=True), ForeignKey("food_listings.id"), nullable=True)
    donation_id = Column(Uuid(as_uuid=True), ForeignKey("donations.id"), nullable=True)
    food_saved_kg = Column(Float, nullable=False, default=0)
    meals_provided = Column(Integer, nullable=False, default=0)
    co2_saved_kg = Column(Float, nullable=False, default=0)
    category = Column(String)
    date = Column(Date)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
