from uuid import UUID
from pydantic import BaseModel

from foodshare.schemas.profile import ProfileResponse


class SessionUser(BaseModel):
    id: UUID
    email: str | None = None


class SessionResponse(BaseModel):
    state: str
    user: SessionUser | None = None
    profile: ProfileResponse | None = None
