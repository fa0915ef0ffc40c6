from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from foodshare.database import utcnow
from foodshare.models.donation_request import RequestStatus
from foodshare.models.profile import Role
from foodshare.schemas.donation_request import DonationRequestCreate, DonationRequestResponse
from foodshare.services.dashboards import recipient_requests
from foodshare.services.data_client import RemoteDataClient, get_client
from foodshare.services.session import UserSession
from foodshare.utils.auth import require_role

router = APIRouter()

recipient_only = require_role(Role.RECIPIENT)


def _get_own_request(client: RemoteDataClient, request_id: UUID, session: UserSession) -> dict:
    result = client.select("donation_requests", filters={"id": request_id})
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    request = result.first()
    if not request:
        raise HTTPException(status_code=404, detail="Request not found")
    if request["recipient_id"] != session.user.id:
        raise HTTPException(status_code=403, detail="Request belongs to another recipient")
    return request


def _close_request(client: RemoteDataClient, request_id: UUID, session: UserSession, status: RequestStatus) -> dict:
    request = _get_own_request(client, request_id, session)
    if request["status"] != RequestStatus.OPEN.value:
        raise HTTPException(
            status_code=409,
            detail=f"Only open requests can be {status.value}; this one is {request['status']}",
        )
    result = client.update(
        "donation_requests",
        {"status": status.value, "updated_at": utcnow()},
        match={"id": request_id},
    )
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return result.first()


@router.get("/mine", response_model=list[DonationRequestResponse])
def my_requests(
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    return recipient_requests(client, session.user.id)


@router.post("/", response_model=DonationRequestResponse, status_code=201)
def create_request(
    body: DonationRequestCreate,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    data = body.model_dump()
    data["urgency"] = body.urgency.value
    result = client.insert("donation_requests", {
        **data,
        "recipient_id": session.user.id,
        "status": RequestStatus.OPEN.value,
    })
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return result.first()


@router.post("/{request_id}/fulfill", response_model=DonationRequestResponse)
def fulfill_request(
    request_id: UUID,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    return _close_request(client, request_id, session, RequestStatus.FULFILLED)


@router.post("/{request_id}/cancel", response_model=DonationRequestResponse)
def cancel_request(
    request_id: UUID,
    client: RemoteDataClient = Depends(get_client),
    session: UserSession = Depends(recipient_only),
):
    return _close_request(client, request_id, session, RequestStatus.CANCELLED)
