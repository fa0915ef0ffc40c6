import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from foodshare.database import utcnow
from foodshare.models.donation import DonationStatus
from foodshare.models.listing import ListingStatus
from foodshare.models.profile import Role
from foodshare.schemas.donation import DonationResponse, ReservationResponse
from foodshare.schemas.listing import FoodListingCreate, FoodListingUpdate, FoodListingResponse
from foodshare.services.dashboards import available_listings, donor_listings
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession
from foodshare.utils.auth import require_role

logger = logging.getLogger(__name__)

router = APIRouter()

donor_only = require_role(Role.DONOR)
recipient_only = require_role(Role.RECIPIENT)


def _get_listing(client: RemoteDataClient, listing_id: UUID) -> dict:
    result = client.select("food_listings", filters={"id": listing_id})
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    listing = result.first()
    if not listing:
        raise HTTPException(status_code=404, detail="Listing not found")
    return listing


def _get_own_listing(client: RemoteDataClient, listing_id: UUID, session: UserSession) -> dict:
    listing = _get_listing(client, listing_id)
    if listing["donor_id"] != session.user.id:
        raise HTTPException(status_code=403, detail="Listing belongs to another donor")
    return listing


def _set_status(client: RemoteDataClient, listing_id: UUID, status: ListingStatus) -> dict:
    result = client.update(
        "food_listings",
        {"status": status.value, "updated_at": utcnow()},
        match={"id": listing_id},
    )
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return result.first()


def _close_listing(client: RemoteDataClient, listing_id: UUID, session: UserSession, status: ListingStatus) -> dict:
    listing = _get_own_listing(client, listing_id, session)
    if listing["status"] != ListingStatus.AVAILABLE.value:
        raise HTTPException(
            status_code=409,
            detail=f"Only available listings can be {status.value}; this one is {listing['status']}",
        )
    return _set_status(client, listing_id, status)


@router.get("/mine", response_model=list[FoodListingResponse])
def my_listings(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(donor_only),
):
    return donor_listings(client, session.user.id)


@router.get("/available", response_model=list[FoodListingResponse])
def browse_available(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    return available_listings(client)


@router.post("/", response_model=FoodListingResponse, status_code=201)
def create_listing(
    body: FoodListingCreate,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(donor_only),
):
    result = client.insert("food_listings", {
        **body.model_dump(),
        "donor_id": session.user.id,
        "status": ListingStatus.AVAILABLE.value,
    })
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    logger.info(f"Donor {session.user.id} listed {result.first()['id']}")
    return result.first()


@router.patch("/{listing_id}", response_model=FoodListingResponse)
def update_listing(
    listing_id: UUID,
    body: FoodListingUpdate,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(donor_only),
):
    _get_own_listing(client, listing_id, session)
    data = body.model_dump(exclude_unset=True)
    data["updated_at"] = utcnow()
    result = client.update("food_listings", data, match={"id": listing_id})
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return result.first()


@router.post("/{listing_id}/complete", response_model=FoodListingResponse)
def complete_listing(
    listing_id: UUID,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(donor_only),
):
    return _close_listing(client, listing_id, session, ListingStatus.COMPLETED)


@router.post("/{listing_id}/cancel", response_model=FoodListingResponse)
def cancel_listing(
    listing_id: UUID,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(donor_only),
):
    return _close_listing(client, listing_id, session, ListingStatus.CANCELLED)


@router.post("/{listing_id}/request", response_model=ReservationResponse, status_code=201)
def request_listing(
    listing_id: UUID,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    """Record a pending donation for the caller, then mark the listing reserved.

    The two writes commit separately. If the second fails the donation stays
    pending against a listing that still shows as available.
    """
    listing = _get_listing(client, listing_id)
    if listing["status"] != ListingStatus.AVAILABLE.value:
        raise HTTPException(status_code=409, detail="Listing is no longer available")

    donation = client.insert("donations", {
        "listing_id": listing_id,
        "donor_id": listing["donor_id"],
        "recipient_id": session.user.id,
        "quantity": listing["quantity"],
        "status": DonationStatus.PENDING.value,
    })
    if not donation.ok:
        raise HTTPException(status_code=400, detail=donation.error)

    reserved = client.update(
        "food_listings",
        {"status": ListingStatus.RESERVED.value, "updated_at": utcnow()},
        match={"id": listing_id},
    )
    if not reserved.ok:
        logger.error(
            f"Donation {donation.first()['id']} is pending but listing {listing_id} "
            f"was not reserved: {reserved.error}"
        )
        raise HTTPException(status_code=400, detail=reserved.error)

    return ReservationResponse(
        donation=DonationResponse.model_validate(donation.first()),
        listing_status=ListingStatus.RESERVED.value,
    )
