from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from foodshare.models.profile import Role
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession, resolve_session

bearer_scheme = HTTPBearer(auto_error=False)


def get_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    client: RemoteDataClient = Depends(get_client),
) -> UserSession:
    token = credentials.credentials if credentials else None
    return resolve_session(client, token)


def get_current_session(session: UserSession = Depends(get_session)) -> UserSession:
    if not session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def require_role(*roles: Role):
    """Dependency factory admitting only sessions whose profile has one of `roles`."""

    def dependency(session: UserSession = Depends(get_current_session)) -> UserSession:
        if session.profile.role not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not enough permissions")
        return session

    return dependency
