"""Recipient flows: browsing, reserving a listing, and managing donation requests."""
from datetime import datetime

from foodshare.models import Donation, DonationRequest, FoodListing
from foodshare.services.data_client import QueryResult, RemoteDataClient

REQUEST_FORM = {
    "title": "Milk for breakfast club",
    "description": "Forty children, five mornings a week",
    "category": "Dairy",
    "quantity_needed": "30 litres",
}


def test_browse_shows_only_available_listings(client, make_profile, make_listing, headers_for):
    donor = make_profile("donor")
    recipient = make_profile("recipient")
    make_listing(donor, title="open", status="available")
    make_listing(donor, title="taken", status="reserved")
    make_listing(donor, title="done", status="completed")

    body = client.get("/api/v1/listings/available", headers=headers_for(recipient)).json()
    assert [l["title"] for l in body] == ["open"]


def test_request_listing_creates_pending_donation_and_reserves(client, db, make_profile, make_listing, headers_for):
    donor = make_profile("donor")
    recipient = make_profile("recipient")
    listing = make_listing(donor, quantity="10 kg")
    listing_id, donor_id, recipient_id = listing.id, donor.id, recipient.id

    response = client.post(f"/api/v1/listings/{listing_id}/request", headers=headers_for(recipient))
    assert response.status_code == 201
    body = response.json()
    assert body["listing_status"] == "reserved"
    assert body["donation"]["status"] == "pending"
    assert body["donation"]["quantity"] == "10 kg"

    db.expire_all()
    donations = db.query(Donation).all()
    assert len(donations) == 1
    assert donations[0].listing_id == listing_id
    assert donations[0].recipient_id == recipient_id
    assert donations[0].donor_id == donor_id
    assert donations[0].status == "pending"
    assert db.get(FoodListing, listing_id).status == "reserved"


def test_reserved_listing_cannot_be_requested_again(client, make_profile, make_listing, headers_for):
    donor = make_profile("donor")
    first = make_profile("recipient")
    second = make_profile("recipient")
    listing = make_listing(donor)

    assert client.post(f"/api/v1/listings/{listing.id}/request", headers=headers_for(first)).status_code == 201
    assert client.post(f"/api/v1/listings/{listing.id}/request", headers=headers_for(second)).status_code == 409


def test_failed_reservation_leaves_pending_donation(client, db, make_profile, make_listing, headers_for, monkeypatch):
    donor = make_profile("donor")
    recipient = make_profile("recipient")
    listing = make_listing(donor)
    listing_id = listing.id

    def broken_update(self, table, values, match):
        return QueryResult(error="permission denied for table food_listings")

    monkeypatch.setattr(RemoteDataClient, "update", broken_update)

    response = client.post(f"/api/v1/listings/{listing_id}/request", headers=headers_for(recipient))
    assert response.status_code == 400
    assert response.json()["detail"] == "permission denied for table food_listings"

    db.expire_all()
    assert db.query(Donation).count() == 1
    assert db.get(FoodListing, listing_id).status == "available"


def test_donors_cannot_request_listings(client, make_profile, make_listing, headers_for):
    donor = make_profile("donor")
    listing = make_listing(donor)
    assert client.post(f"/api/v1/listings/{listing.id}/request", headers=headers_for(donor)).status_code == 403


def test_create_request_defaults(client, db, make_profile, headers_for):
    recipient = make_profile("recipient")
    response = client.post("/api/v1/requests/", json=REQUEST_FORM, headers=headers_for(recipient))
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "open"
    assert body["urgency"] == "medium"
    assert body["recipient_id"] == str(recipient.id)
    assert body["actions"] == ["fulfill", "cancel"]
    assert db.query(DonationRequest).count() == 1


def test_create_request_validation(client, make_profile, headers_for):
    recipient = make_profile("recipient")
    headers = headers_for(recipient)
    assert client.post("/api/v1/requests/", json={**REQUEST_FORM, "urgency": "urgent"}, headers=headers).status_code == 422
    assert client.post("/api/v1/requests/", json={**REQUEST_FORM, "quantity_needed": ""}, headers=headers).status_code == 422


def test_fulfill_and_cancel_only_from_open(client, make_profile, make_request, headers_for):
    recipient = make_profile("recipient")
    headers = headers_for(recipient)
    to_fulfill = make_request(recipient)
    to_cancel = make_request(recipient)

    body = client.post(f"/api/v1/requests/{to_fulfill.id}/fulfill", headers=headers).json()
    assert body["status"] == "fulfilled"
    assert body["actions"] == []

    body = client.post(f"/api/v1/requests/{to_cancel.id}/cancel", headers=headers).json()
    assert body["status"] == "cancelled"

    assert client.post(f"/api/v1/requests/{to_fulfill.id}/cancel", headers=headers).status_code == 409


def test_cannot_touch_another_recipients_request(client, make_profile, make_request, headers_for):
    owner = make_profile("recipient")
    other = make_profile("recipient")
    request = make_request(owner)
    assert client.post(f"/api/v1/requests/{request.id}/fulfill", headers=headers_for(other)).status_code == 403


def test_recipient_dashboard(client, make_profile, make_listing, make_request, headers_for):
    donor = make_profile("donor")
    recipient = make_profile("recipient")
    other = make_profile("recipient")
    make_listing(donor, status="available")
    make_listing(donor, status="available")
    make_listing(donor, status="reserved")
    make_request(recipient, status="open", created_at=datetime(2024, 1, 1))
    make_request(recipient, status="fulfilled", created_at=datetime(2024, 2, 1))
    make_request(other, status="fulfilled")

    body = client.get("/api/v1/dashboard/", headers=headers_for(recipient)).json()
    assert body["role"] == "recipient"
    assert body["stats"] == {"available": 2, "my_requests": 2, "fulfilled": 1}
    assert len(body["available_listings"]) == 2
    assert [r["status"] for r in body["my_requests"]] == ["fulfilled", "open"]

    mine = client.get("/api/v1/requests/mine", headers=headers_for(recipient)).json()
    assert len(mine) == 2
