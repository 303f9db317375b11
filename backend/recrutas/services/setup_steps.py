"""Guided setup step lists.

Maps an account role to the ordered steps of the onboarding wizard:

- unset role   → Role
- candidate    → Role, Resume, Info, Skills
- talent_owner → Role, Company

The list is never empty and always starts with the role-selection step.
Step tuples are built once at import time, so ``steps_for`` returns the
same object for the same role and progress can be recomputed freely.
"""

from dataclasses import dataclass
from enum import Enum

from recrutas.services.account_role import Role

# =============================================================================
# Enums
# =============================================================================


class StepKey(Enum):
    """Identifies which form a step renders."""

    ROLE = "role"
    RESUME = "resume"
    INFO = "info"
    SKILLS = "skills"
    COMPANY = "company"


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Step:
    """One screen of the guided setup wizard.

    Attributes:
        name: Display label shown in the step indicator.
        index: 1-based position in the active step list.
        render_key: Which form to show for this step.
        skippable: Whether the user may move past the step without
            submitting it (only the resume upload).
    """

    name: str
    index: int
    render_key: StepKey
    skippable: bool = False


# =============================================================================
# Step Definitions
# =============================================================================

_STEP_NAMES: dict[StepKey, str] = {
    StepKey.ROLE: "Role",
    StepKey.RESUME: "Resume",
    StepKey.INFO: "Info",
    StepKey.SKILLS: "Skills",
    StepKey.COMPANY: "Company",
}

_SKIPPABLE: frozenset[StepKey] = frozenset({StepKey.RESUME})


def _build(*keys: StepKey) -> tuple[Step, ...]:
    return tuple(
        Step(
            name=_STEP_NAMES[key],
            index=position,
            render_key=key,
            skippable=key in _SKIPPABLE,
        )
        for position, key in enumerate(keys, start=1)
    )


# WHY dict keyed by Role | None: one declarative table instead of nested
# conditionals. None is the unset role (role selection not made yet).
_STEP_LISTS: dict[Role | None, tuple[Step, ...]] = {
    None: _build(StepKey.ROLE),
    Role.CANDIDATE: _build(
        StepKey.ROLE, StepKey.RESUME, StepKey.INFO, StepKey.SKILLS
    ),
    Role.TALENT_OWNER: _build(StepKey.ROLE, StepKey.COMPANY),
}


# =============================================================================
# Public Functions
# =============================================================================


def steps_for(role: Role | None) -> tuple[Step, ...]:
    """Return the ordered step list for a role.

    Args:
        role: Selected role, or None while no role has been chosen.

    Returns:
        Non-empty tuple of steps whose first element is the role step.
    """
    return _STEP_LISTS[role]


def step_count(role: Role | None) -> int:
    """Return the number of steps for a role."""
    return len(_STEP_LISTS[role])
