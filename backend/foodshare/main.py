import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from foodshare.config import get_settings
from foodshare.logging_config import setup_logging
from foodshare.routers import admin, analytics, dashboard, listings, requests, session

settings = get_settings()
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FoodShare API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Build allowed origins list (supports comma-separated FRONTEND_URL for multiple domains)
_origins = ["http://localhost:5173"]
for origin in settings.FRONTEND_URL.split(","):
    origin = origin.strip()
    if origin and origin not in _origins:
        _origins.append(origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session.router, prefix="/api/v1/session", tags=["Session"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])
app.include_router(listings.router, prefix="/api/v1/listings", tags=["Listings"])
app.include_router(requests.router, prefix="/api/v1/requests", tags=["Requests"])
app.include_router(admin.router, prefix="/api/v1/admin", tags=["Admin"])
app.include_router(analytics.router, prefix="/api/v1/analytics", tags=["Analytics"])

logger.info(f"FoodShare API configured with origins {_origins}")


@app.get("/health")
def health():
    return {"status": "ok"}
