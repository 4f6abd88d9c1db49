"""API v1 router aggregator.

All v1 endpoint routers are included here under the /api/v1 prefix.
"""

from fastapi import APIRouter

from app.api.v1 import onboarding

router = APIRouter()

router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
