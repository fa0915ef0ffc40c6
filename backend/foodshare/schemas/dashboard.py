from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from foodshare.schemas.analytics import CategoryCount, ImpactMetrics, MonthlyCount
from foodshare.schemas.donation_request import DonationRequestResponse
from foodshare.schemas.listing import FoodListingResponse


# ── Stats ────────────────────────────────────────────────────────

class DonorStats(BaseModel):
    total: int = 0
    available: int = 0
    completed: int = 0


class RecipientStats(BaseModel):
    available: int = 0
    my_requests: int = 0
    fulfilled: int = 0


class AdminStats(BaseModel):
    total_users: int = 0
    donors: int = 0
    recipients: int = 0
    total_listings: int = 0
    active_listings: int = 0
    total_requests: int = 0
    open_requests: int = 0


class AnalystStats(BaseModel):
    total_donations: int = 0
    active_donors: int = 0
    active_recipients: int = 0
    food_saved: int = 0
    meals_provided: int = 0
    co2_saved: float = 0.0


# ── Dashboard variants (tagged by role) ─────────────────────────

class DonorDashboard(BaseModel):
    role: Literal["donor"] = "donor"
    stats: DonorStats
    listings: list[FoodListingResponse] = []


class RecipientDashboard(BaseModel):
    role: Literal["recipient"] = "recipient"
    stats: RecipientStats
    available_listings: list[FoodListingResponse] = []
    my_requests: list[DonationRequestResponse] = []


class AdminDashboard(BaseModel):
    role: Literal["admin"] = "admin"
    stats: AdminStats


class AnalystDashboard(BaseModel):
    role: Literal["analyst"] = "analyst"
    stats: AnalystStats
    impact: ImpactMetrics
    categories: list[CategoryCount] = []
    trends: list[MonthlyCount] = []


Dashboard = Annotated[
    Union[DonorDashboard, RecipientDashboard, AdminDashboard, AnalystDashboard],
    Field(discriminator="role"),
]
