"""
Impact Analytics — aggregates listings and waste analytics for the analyst views.

Everything here is a pure function over rows already fetched by the data
client, so a reload without intervening writes gives the same snapshot.
"""

import math
from collections import defaultdict
from datetime import date, datetime

# Litres of water not wasted per kilogram of food saved
WATER_LITRES_PER_KG = 2.5
TREND_MONTHS = 6


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from zero for positive values, as the dashboards always have."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def summarize_waste(analytics: list[dict]) -> dict:
    """Raw totals over waste_analytics rows."""
    food_saved = sum(float(a.get("food_saved_kg") or 0) for a in analytics)
    meals = sum(int(a.get("meals_provided") or 0) for a in analytics)
    co2_saved = sum(float(a.get("co2_saved_kg") or 0) for a in analytics)
    return {"food_saved_kg": food_saved, "meals_provided": meals, "co2_saved_kg": co2_saved}


def impact_metrics(analytics: list[dict]) -> dict:
    totals = summarize_waste(analytics)
    food_saved = totals["food_saved_kg"]
    return {
        "meals_provided": totals["meals_provided"],
        "food_saved": int(round_half_up(food_saved)),
        "water_saved": int(round_half_up(food_saved * WATER_LITRES_PER_KG)),
    }


def _with_percent(rows: list[dict]) -> list[dict]:
    max_count = max([r["count"] for r in rows] + [1])
    for r in rows:
        r["percent"] = round(r["count"] / max_count * 100, 1)
    return rows


def category_breakdown(listings: list[dict]) -> list[dict]:
    """Listing counts per category, largest first; ties keep first-seen order."""
    counts: dict[str, int] = defaultdict(int)
    for l in listings:
        counts[l["category"]] += 1

    rows = sorted(
        [{"category": k, "count": v} for k, v in counts.items()],
        key=lambda x: x["count"],
        reverse=True,
    )
    return _with_percent(rows)


def _month_key(created_at) -> str | None:
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    if isinstance(created_at, (date, datetime)):
        return created_at.strftime("%Y-%m")
    return None


def monthly_trend(listings: list[dict], months: int = TREND_MONTHS) -> list[dict]:
    """Listings created per year-month, oldest first, keeping the latest `months` buckets."""
    monthly: dict[str, int] = defaultdict(int)
    for l in listings:
        key = _month_key(l.get("created_at"))
        if key:
            monthly[key] += 1

    rows = [
        {
            "month": k,
            "label": datetime.strptime(k, "%Y-%m").strftime("%b %Y"),
            "count": v,
        }
        for k, v in sorted(monthly.items())
    ]
    rows = rows[-months:] if months > 0 else []
    return _with_percent(rows)


def count_where(rows: list[dict], field: str, value) -> int:
    return sum(1 for r in rows if r.get(field) == value)
