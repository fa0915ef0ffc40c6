import enum

from sqlalchemy import Column, String, Text

from foodshare.database import Base, BaseMixin


class Role(str, enum.Enum):
    ADMIN = "admin"
    DONOR = "donor"
    RECIPIENT = "recipient"
    ANALYST = "analyst"


class Profile(BaseMixin, Base):
    """One profile per authenticated identity; the id is the identity's id."""

    __tablename__ = "profiles"

    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    role = Column(String, nullable=False, index=True)
    organization_name = Column(String)
    phone = Column(String)
    address = Column(Text)
