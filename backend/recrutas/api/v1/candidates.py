"""Candidate profile endpoints for guided setup.

Endpoints:
- POST /candidate/profile: Info step (name and headline)
- PATCH /candidate/profile: Skills step (completes candidate setup)
"""

import structlog
from fastapi import APIRouter

from recrutas.api.deps import CurrentUser, DbSession, require_role
from recrutas.core.responses import DataResponse
from recrutas.repositories.profile_repository import CandidateProfileRepository
from recrutas.repositories.user_repository import UserRepository
from recrutas.schemas.onboarding import BasicInfoRequest, SkillsRequest
from recrutas.services.account_role import Role

logger = structlog.get_logger()

router = APIRouter()


@router.post("/profile")
async def save_basic_info(
    body: BasicInfoRequest,
    user: CurrentUser,
    db: DbSession,
) -> DataResponse[dict]:
    """Save the candidate's name and headline.

    Raises:
        InvalidStateError: If the user is not a candidate.
    """
    require_role(user, Role.CANDIDATE)

    await UserRepository.set_name(
        db, user, first_name=body.first_name, last_name=body.last_name
    )
    profile = await CandidateProfileRepository.save_summary(db, user.id, body.summary)
    await db.commit()

    return DataResponse(
        data={
            "first_name": user.first_name,
            "last_name": user.last_name,
            "summary": profile.summary,
            "skills": list(profile.skills),
            "is_complete": profile.is_complete,
        }
    )


@router.patch("/profile")
async def save_skills(
    body: SkillsRequest,
    user: CurrentUser,
    db: DbSession,
) -> DataResponse[dict]:
    """Save the candidate's skills and mark candidate setup complete.

    Raises:
        InvalidStateError: If the user is not a candidate.
    """
    require_role(user, Role.CANDIDATE)

    profile = await CandidateProfileRepository.save_skills(db, user.id, body.skills)
    await db.commit()
    logger.info(
        "Candidate setup completed",
        user_id=str(user.id),
        skill_count=len(profile.skills),
    )

    return DataResponse(
        data={
            "summary": profile.summary,
            "skills": list(profile.skills),
            "is_complete": profile.is_complete,
        }
    )
