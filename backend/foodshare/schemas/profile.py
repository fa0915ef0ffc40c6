from datetime import datetime
from uuid import UUID
from pydantic import BaseModel

from foodshare.models.profile import Role


class ProfileResponse(BaseModel):
    id: UUID
    email: str
    full_name: str
    role: Role
    organization_name: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
