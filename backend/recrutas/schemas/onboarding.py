"""Guided setup request schemas.

Shared by the account service endpoints and by the setup flow controller,
which validates a step's form payload before submitting it.

Wire format uses camelCase keys (firstName, companyName, ...) to match the
web client; Python code uses snake_case. All schemas use
ConfigDict(extra="forbid") to reject unexpected fields.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recrutas.services.setup_steps import StepKey

_MAX_NAME_LENGTH = 100
_MAX_SUMMARY_LENGTH = 255
_MAX_SKILL_LENGTH = 100
_MAX_URL_LENGTH = 500

MAX_SKILLS = 10
"""The skills step accepts up to 10 top skills."""


def _strip(v: object) -> object:
    if isinstance(v, str):
        return v.strip()
    return v


def _require_text(v: str, label: str) -> str:
    if not v:
        msg = f"{label} is required"
        raise ValueError(msg)
    return v


# =============================================================================
# Role Step
# =============================================================================


class RoleSelectionRequest(BaseModel):
    """Request body for POST /auth/role.

    The role is kept as a plain string so the endpoint can answer an
    unknown value with a single "Invalid role" message.
    """

    model_config = ConfigDict(extra="forbid")

    role: str = Field(..., max_length=32)


# =============================================================================
# Candidate Steps
# =============================================================================


class BasicInfoRequest(BaseModel):
    """Request body for POST /candidate/profile (Info step).

    Attributes:
        first_name: Given name (required).
        last_name: Family name (required).
        summary: Optional headline, e.g. "Senior Frontend Developer".
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    first_name: str = Field(..., alias="firstName", max_length=_MAX_NAME_LENGTH)
    last_name: str = Field(..., alias="lastName", max_length=_MAX_NAME_LENGTH)
    summary: str = Field(default="", max_length=_MAX_SUMMARY_LENGTH)

    @field_validator("first_name", "last_name", "summary", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Strip surrounding whitespace."""
        return _strip(v)

    @field_validator("first_name")
    @classmethod
    def first_name_not_empty(cls, v: str) -> str:
        """First name cannot be blank."""
        return _require_text(v, "First name")

    @field_validator("last_name")
    @classmethod
    def last_name_not_empty(cls, v: str) -> str:
        """Last name cannot be blank."""
        return _require_text(v, "Last name")


class SkillsRequest(BaseModel):
    """Request body for PATCH /candidate/profile (Skills step).

    Skills are trimmed, blanks dropped and duplicates removed
    (case-insensitive, first spelling wins) before the 1..10 bound is checked.
    """

    model_config = ConfigDict(extra="forbid")

    skills: list[str]

    @field_validator("skills")
    @classmethod
    def normalize_skills(cls, v: list[str]) -> list[str]:
        """Deduplicate and bound the skill list."""
        seen: set[str] = set()
        result: list[str] = []
        for raw in v:
            skill = raw.strip()
            if not skill or skill.lower() in seen:
                continue
            if len(skill) > _MAX_SKILL_LENGTH:
                msg = f"Skill names are limited to {_MAX_SKILL_LENGTH} characters"
                raise ValueError(msg)
            seen.add(skill.lower())
            result.append(skill)
        if not result:
            msg = "At least one skill is required"
            raise ValueError(msg)
        if len(result) > MAX_SKILLS:
            msg = f"Add up to {MAX_SKILLS} skills"
            raise ValueError(msg)
        return result


# =============================================================================
# Talent Owner Steps
# =============================================================================


class CompanyProfileRequest(BaseModel):
    """Request body for POST /talent-owner/profile/complete (Company step)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    company_name: str = Field(..., alias="companyName", max_length=_MAX_NAME_LENGTH)
    website: str = Field(default="", max_length=_MAX_URL_LENGTH)
    company_size: str = Field(default="", alias="companySize", max_length=50)

    @field_validator("company_name", "website", "company_size", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Strip surrounding whitespace."""
        return _strip(v)

    @field_validator("company_name")
    @classmethod
    def company_name_not_empty(cls, v: str) -> str:
        """Company name cannot be blank."""
        return _require_text(v, "Company name")


# WHY no entry for ROLE/RESUME: the role step submits through
# select_role(), and resume upload happens outside the setup flow.
STEP_FORMS: dict[StepKey, type[BaseModel]] = {
    StepKey.INFO: BasicInfoRequest,
    StepKey.SKILLS: SkillsRequest,
    StepKey.COMPANY: CompanyProfileRequest,
}
"""Form schema for each step that submits data."""
