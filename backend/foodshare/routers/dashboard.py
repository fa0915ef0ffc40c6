from fastapi import APIRouter, Depends

from foodshare.schemas.dashboard import Dashboard
from foodshare.services.dashboards import load_dashboard
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession
from foodshare.utils.auth import get_current_session

router = APIRouter()


@router.get("/", response_model=Dashboard)
def dashboard(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(get_current_session),
):
    return load_dashboard(client, session)
