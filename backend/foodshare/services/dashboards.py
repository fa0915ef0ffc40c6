"""
Role dashboards — each loads its role-scoped slice and derives its counts.

Every loader re-fetches from scratch. A failed read is logged and treated as
an empty result, so a dashboard degrades to zeros instead of erroring.
"""

import logging
from uuid import UUID

from foodshare.models.donation_request import RequestStatus
from foodshare.models.listing import ListingStatus
from foodshare.models.profile import Role
from foodshare.schemas.analytics import CategoryCount, ImpactMetrics, MonthlyCount
from foodshare.schemas.dashboard import (
    AdminDashboard, AdminStats,
    AnalystDashboard, AnalystStats,
    DonorDashboard, DonorStats,
    RecipientDashboard, RecipientStats,
)
from foodshare.schemas.donation_request import DonationRequestResponse
from foodshare.schemas.listing import FoodListingResponse
from foodshare.schemas.profile import ProfileResponse
from foodshare.services.data_client import RemoteDataClient
from foodshare.services.impact_analytics import (
    category_breakdown, count_where, impact_metrics, monthly_trend,
    round_half_up, summarize_waste,
)
from foodshare.services.session import UserSession

logger = logging.getLogger(__name__)


def fetch_rows(client: RemoteDataClient, table: str, what: str, **query) -> list[dict]:
    result = client.select(table, **query)
    if not result.ok:
        logger.error(f"Error loading {what}: {result.error}")
        return []
    return result.data


# ── Donor ────────────────────────────────────────────────────────

def donor_listings(client: RemoteDataClient, donor_id: UUID) -> list[FoodListingResponse]:
    rows = fetch_rows(
        client, "food_listings", "listings",
        filters={"donor_id": donor_id}, order_by="created_at", ascending=False,
    )
    return [FoodListingResponse.model_validate(r) for r in rows]


def load_donor_dashboard(client: RemoteDataClient, session: UserSession) -> DonorDashboard:
    listings = donor_listings(client, session.user.id)
    stats = DonorStats(
        total=len(listings),
        available=sum(1 for l in listings if l.status == ListingStatus.AVAILABLE),
        completed=sum(1 for l in listings if l.status == ListingStatus.COMPLETED),
    )
    return DonorDashboard(stats=stats, listings=listings)


# ── Recipient ────────────────────────────────────────────────────

def available_listings(client: RemoteDataClient) -> list[FoodListingResponse]:
    rows = fetch_rows(
        client, "food_listings", "available food",
        filters={"status": ListingStatus.AVAILABLE.value}, order_by="created_at", ascending=False,
    )
    return [FoodListingResponse.model_validate(r) for r in rows]


def recipient_requests(client: RemoteDataClient, recipient_id: UUID) -> list[DonationRequestResponse]:
    rows = fetch_rows(
        client, "donation_requests", "requests",
        filters={"recipient_id": recipient_id}, order_by="created_at", ascending=False,
    )
    return [DonationRequestResponse.model_validate(r) for r in rows]


def load_recipient_dashboard(client: RemoteDataClient, session: UserSession) -> RecipientDashboard:
    food = available_listings(client)
    requests = recipient_requests(client, session.user.id)
    stats = RecipientStats(
        available=len(food),
        my_requests=len(requests),
        fulfilled=sum(1 for r in requests if r.status == RequestStatus.FULFILLED),
    )
    return RecipientDashboard(stats=stats, available_listings=food, my_requests=requests)


# ── Admin ────────────────────────────────────────────────────────

def load_admin_dashboard(client: RemoteDataClient, session: UserSession) -> AdminDashboard:
    users = fetch_rows(client, "profiles", "stats", columns=["role"])
    listings = fetch_rows(client, "food_listings", "stats", columns=["status"])
    requests = fetch_rows(client, "donation_requests", "stats", columns=["status"])

    stats = AdminStats(
        total_users=len(users),
        donors=count_where(users, "role", Role.DONOR.value),
        recipients=count_where(users, "role", Role.RECIPIENT.value),
        total_listings=len(listings),
        active_listings=count_where(listings, "status", ListingStatus.AVAILABLE.value),
        total_requests=len(requests),
        open_requests=count_where(requests, "status", RequestStatus.OPEN.value),
    )
    return AdminDashboard(stats=stats)


def list_profiles(client: RemoteDataClient, role: Role | None = None) -> list[ProfileResponse]:
    filters = {"role": role.value} if role else None
    rows = fetch_rows(
        client, "profiles", "users",
        filters=filters, order_by="created_at", ascending=False,
    )
    return [ProfileResponse.model_validate(r) for r in rows]


def list_all_listings(client: RemoteDataClient, status: ListingStatus | None = None) -> list[FoodListingResponse]:
    filters = {"status": status.value} if status else None
    rows = fetch_rows(
        client, "food_listings", "listings",
        filters=filters, order_by="created_at", ascending=False,
    )
    return [FoodListingResponse.model_validate(r) for r in rows]


# ── Analyst ──────────────────────────────────────────────────────

def load_impact(client: RemoteDataClient) -> ImpactMetrics:
    analytics = fetch_rows(client, "waste_analytics", "metrics")
    return ImpactMetrics(**impact_metrics(analytics))


def load_categories(client: RemoteDataClient) -> list[CategoryCount]:
    listings = fetch_rows(client, "food_listings", "category data", columns=["category"])
    return [CategoryCount(**c) for c in category_breakdown(listings)]


def load_trends(client: RemoteDataClient) -> list[MonthlyCount]:
    listings = fetch_rows(
        client, "food_listings", "trends data",
        columns=["created_at"], order_by="created_at", ascending=True,
    )
    return [MonthlyCount(**m) for m in monthly_trend(listings)]


def load_analyst_dashboard(client: RemoteDataClient, session: UserSession) -> AnalystDashboard:
    donations = fetch_rows(client, "donations", "analytics", columns=["id"])
    profiles = fetch_rows(client, "profiles", "analytics", columns=["role"])
    analytics = fetch_rows(client, "waste_analytics", "analytics")

    totals = summarize_waste(analytics)
    stats = AnalystStats(
        total_donations=len(donations),
        active_donors=count_where(profiles, "role", Role.DONOR.value),
        active_recipients=count_where(profiles, "role", Role.RECIPIENT.value),
        food_saved=int(round_half_up(totals["food_saved_kg"])),
        meals_provided=totals["meals_provided"],
        co2_saved=round_half_up(totals["co2_saved_kg"], 1),
    )
    return AnalystDashboard(
        stats=stats,
        impact=ImpactMetrics(**impact_metrics(analytics)),
        categories=load_categories(client),
        trends=load_trends(client),
    )


DASHBOARD_LOADERS = {
    Role.DONOR: load_donor_dashboard,
    Role.RECIPIENT: load_recipient_dashboard,
    Role.ADMIN: load_admin_dashboard,
    Role.ANALYST: load_analyst_dashboard,
}


def load_dashboard(client: RemoteDataClient, session: UserSession):
    """Pick the dashboard variant for the session's role and load it."""
    loader = DASHBOARD_LOADERS[session.profile.role]
    return loader(client, session)
