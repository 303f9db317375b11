"""API v1 router aggregator.

All v1 endpoint routers are included here and mounted at /api/v1.
"""

from fastapi import APIRouter

from recrutas.api.v1 import auth, candidates, talent_owners

router = APIRouter()

# =============================================================================
# Account
# =============================================================================

router.include_router(auth.router, prefix="/auth", tags=["auth"])

# =============================================================================
# Guided Setup Profiles
# =============================================================================

router.include_router(candidates.router, prefix="/candidate", tags=["candidate"])
router.include_router(
    talent_owners.router, prefix="/talent-owner", tags=["talent-owner"]
)
