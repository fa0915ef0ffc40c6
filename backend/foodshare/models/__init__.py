from foodshare.models.profile import Profile, Role
from foodshare.models.listing import FoodListing, ListingStatus, FOOD_CATEGORIES
from foodshare.models.donation_request import DonationRequest, RequestStatus, Urgency
from foodshare.models.donation import Donation, DonationStatus
from foodshare.models.waste_analytic import WasteAnalytic

__all__ = [
    "Profile", "Role",
    "FoodListing", "ListingStatus", "FOOD_CATEGORIES",
    "DonationRequest", "RequestStatus", "Urgency",
    "Donation", "DonationStatus",
    "WasteAnalytic",
]
