from fastapi import APIRouter, Depends

from foodshare.models.listing import ListingStatus
from foodshare.models.profile import Role
from foodshare.schemas.listing import FoodListingResponse
from foodshare.schemas.profile import ProfileResponse
from foodshare.services.dashboards import list_all_listings, list_profiles
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession
from foodshare.utils.auth import require_role

router = APIRouter()

admin_only = require_role(Role.ADMIN)


@router.get("/users", response_model=list[ProfileResponse])
def user_management(
    role: Role | None = None,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(admin_only),
):
    return list_profiles(client, role)


@router.get("/listings", response_model=list[FoodListingResponse])
def listings_overview(
    status: ListingStatus | None = None,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(admin_only),
):
    return list_all_listings(client, status)
