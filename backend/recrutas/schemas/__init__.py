"""Pydantic request/response schemas for API endpoints."""

from recrutas.schemas.onboarding import (
    STEP_FORMS,
    BasicInfoRequest,
    CompanyProfileRequest,
    RoleSelectionRequest,
    SkillsRequest,
)

__all__ = [
    "STEP_FORMS",
    "BasicInfoRequest",
    "CompanyProfileRequest",
    "RoleSelectionRequest",
    "SkillsRequest",
]
