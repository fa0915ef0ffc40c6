"""
User sessions — who is calling, and with which profile.

A UserSession is built per request from the bearer token the hosted auth
service issued. It starts in `loading`, ends up `authenticated` once both the
identity and its profile are known, and drops to `unauthenticated` otherwise
or after sign_out().
"""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from jose import JWTError, jwt

from foodshare.config import get_settings
from foodshare.schemas.profile import ProfileResponse
from foodshare.schemas.session import SessionResponse, SessionUser
from foodshare.services.data_client import RemoteDataClient

logger = logging.getLogger(__name__)

# Tokens signed out during this process, mapped to their expiry. The auth service
# still considers them valid until then; past it jwt.decode refuses them anyway.
_revoked_tokens: dict[str, datetime] = {}


def _prune_revoked(now: datetime | None = None) -> None:
    now = now or datetime.now(timezone.utc)
    for token, expires_at in list(_revoked_tokens.items()):
        if expires_at <= now:
            del _revoked_tokens[token]


class SessionState(str, enum.Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass
class UserSession:
    state: SessionState = SessionState.LOADING
    user: SessionUser | None = None
    profile: ProfileResponse | None = None
    token: str | None = None
    expires_at: datetime | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED

    def sign_out(self) -> None:
        _prune_revoked()
        if self.token and self.expires_at:
            _revoked_tokens[self.token] = self.expires_at
        self.state = SessionState.UNAUTHENTICATED
        self.user = None
        self.profile = None
        self.token = None
        self.expires_at = None

    def to_response(self) -> SessionResponse:
        return SessionResponse(state=self.state.value, user=self.user, profile=self.profile)


def decode_token(token: str) -> dict:
    settings = get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
    )


def resolve_session(client: RemoteDataClient, token: str | None) -> UserSession:
    session = UserSession(token=token)
    _prune_revoked()

    if not token or token in _revoked_tokens:
        session.state = SessionState.UNAUTHENTICATED
        session.token = None
        return session

    try:
        payload = decode_token(token)
        user = SessionUser(id=UUID(payload["sub"]), email=payload.get("email"))
        expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    except (JWTError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Rejected session token: {e}")
        session.state = SessionState.UNAUTHENTICATED
        session.token = None
        return session

    session.user = user
    session.expires_at = expires_at
    result = client.select("profiles", filters={"id": user.id})
    if not result.ok:
        logger.error(f"Error loading profile for {user.id}: {result.error}")
    row = result.first()
    if row is None:
        session.state = SessionState.UNAUTHENTICATED
        return session

    session.profile = ProfileResponse.model_validate(row)
    session.state = SessionState.AUTHENTICATED
    return session
