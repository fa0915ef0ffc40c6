import logging

from fastapi import APIRouter, Depends

from foodshare.schemas.session import SessionResponse
from foodshare.services.session import UserSession
from foodshare.utils.auth import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=SessionResponse)
def current_session(session: UserSession = Depends(get_session)):
    return session.to_response()


@router.post("/sign-out", response_model=SessionResponse)
def sign_out(session: UserSession = Depends(get_session)):
    if session.user:
        logger.info(f"User {session.user.id} signed out")
    session.sign_out()
    return session.to_response()
