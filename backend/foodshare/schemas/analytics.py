from pydantic import BaseModel


class ImpactMetrics(BaseModel):
    meals_provided: int = 0
    food_saved: int = 0
    water_saved: int = 0


class CategoryCount(BaseModel):
    category: str
    count: int
    percent: float


class MonthlyCount(BaseModel):
    month: str  # YYYY-MM
    label: str  # e.g. "Mar 2025"
    count: int
    percent: float
