"""Talent owner profile endpoint for guided setup.

Endpoints:
- POST /talent-owner/profile/complete: Company step (completes setup)
"""

import structlog
from fastapi import APIRouter

from recrutas.api.deps import CurrentUser, DbSession, require_role
from recrutas.core.responses import DataResponse
from recrutas.repositories.profile_repository import CompanyProfileRepository
from recrutas.schemas.onboarding import CompanyProfileRequest
from recrutas.services.account_role import Role

logger = structlog.get_logger()

router = APIRouter()


@router.post("/profile/complete")
async def complete_company_profile(
    body: CompanyProfileRequest,
    user: CurrentUser,
    db: DbSession,
) -> DataResponse[dict]:
    """Save the company profile and mark talent owner setup complete.

    Raises:
        InvalidStateError: If the user is not a talent owner.
    """
    require_role(user, Role.TALENT_OWNER)

    profile = await CompanyProfileRepository.complete(
        db,
        user.id,
        company_name=body.company_name,
        website=body.website,
        company_size=body.company_size,
    )
    await db.commit()
    logger.info("Talent owner setup completed", user_id=str(user.id))

    return DataResponse(
        data={
            "company_name": profile.company_name,
            "website": profile.website,
            "company_size": profile.company_size,
            "is_complete": profile.is_complete,
        }
    )
