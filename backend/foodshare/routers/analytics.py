from fastapi import APIRouter, Depends

from foodshare.models.profile import Role
from foodshare.schemas.analytics import CategoryCount, ImpactMetrics, MonthlyCount
from foodshare.services.dashboards import load_categories, load_impact, load_trends
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession
from foodshare.utils.auth import require_role

router = APIRouter()

analyst_only = require_role(Role.ANALYST)


@router.get("/impact", response_model=ImpactMetrics)
def impact(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(analyst_only),
):
    return load_impact(client)


@router.get("/categories", response_model=list[CategoryCount])
def categories(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(analyst_only),
):
    return load_categories(client)


@router.get("/trends", response_model=list[MonthlyCount])
def trends(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(analyst_only),
):
    return load_trends(client)
