"""Account role endpoints used by guided setup.

Endpoints:
- POST /auth/role: persist the role chosen on the first setup step
- GET /auth/me: current user with guided setup status
"""

import structlog
from fastapi import APIRouter, Request

from recrutas.api.deps import CurrentUser, DbSession
from recrutas.core.config import settings
from recrutas.core.errors import ValidationError
from recrutas.core.rate_limiting import limiter
from recrutas.core.responses import DataResponse
from recrutas.repositories.profile_repository import (
    CandidateProfileRepository,
    CompanyProfileRepository,
)
from recrutas.repositories.user_repository import UserRepository
from recrutas.schemas.onboarding import RoleSelectionRequest
from recrutas.services.account_role import Role
from recrutas.services.setup_status import resolve_setup_status

logger = structlog.get_logger()

router = APIRouter()


@router.post("/role")
@limiter.limit(settings.rate_limit_role)
async def set_role(
    request: Request,  # noqa: ARG001 - required by @limiter.limit()
    body: RoleSelectionRequest,
    user: CurrentUser,
    db: DbSession,
) -> DataResponse[dict]:
    """Persist the user's account role.

    Re-submitting the same or a different role overwrites the stored value;
    the wizard restarts its step list on the client when the role changes.

    Raises:
        ValidationError: If the role is not candidate or talent_owner.
    """
    try:
        role = Role.from_string(body.role)
    except ValueError as exc:
        raise ValidationError(
            message="Invalid role",
            details=[{"field": "role", "error": "INVALID_ROLE"}],
        ) from exc

    await UserRepository.set_role(db, user, role)
    await db.commit()
    logger.info("User role set", user_id=str(user.id), role=role.value)

    return DataResponse(data={"success": True, "role": role.value})


@router.get("/me")
async def get_me(user: CurrentUser, db: DbSession) -> DataResponse[dict]:
    """Return the current user and whether guided setup is finished.

    A user with a role and a completed profile for that role gets their
    dashboard as ``redirect_to``; everyone else is sent to guided setup.
    """
    role = Role.from_string(user.role) if user.role else None

    profile_complete = False
    if role is Role.CANDIDATE:
        candidate = await CandidateProfileRepository.get_by_user_id(db, user.id)
        profile_complete = candidate is not None and candidate.is_complete
    elif role is Role.TALENT_OWNER:
        company = await CompanyProfileRepository.get_by_user_id(db, user.id)
        profile_complete = company is not None and company.is_complete

    status = resolve_setup_status(role, profile_complete)

    return DataResponse(
        data={
            "id": str(user.id),
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "role": role.value if role else None,
            "setup_complete": status.setup_complete,
            "redirect_to": status.redirect_to,
        }
    )
