"""Guided setup flow controller.

Owns one onboarding session's wizard state and applies the transitions:

    step=1, role=unset   --select_role(r)-->  step=1, role=r, pending
    step=1, pending      --submit ok------->  step=2, role confirmed
    step=1, pending      --submit failed--->  step=1, role kept, error set
    step=k               --advance()------->  step=k+1   (k < len)
    step=k               --retreat()------->  step=k-1   (k > 1)
    step=k               --jump_to(j)------>  step=j     (1 <= j <= k)
    last step            --submit ok------->  completed, redirect to dashboard

At most one submission (role or step form) is in flight. A second request
while one is pending is rejected with DuplicateSubmissionError before any
network call, and navigation is refused until the submission resolves.
Failed submissions are never retried automatically.

The controller runs on a single asyncio event loop and has no timeout of
its own; the gateway's transport timeout is the only bound. Cancelling the
awaiting task clears the pending flag and leaves the wizard on its step.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from recrutas.adapters.account.base import AccountGateway
from recrutas.core.errors import APIError, ValidationError
from recrutas.schemas.onboarding import STEP_FORMS
from recrutas.services.account_role import Role, dashboard_path
from recrutas.services.setup_errors import (
    DuplicateSubmissionError,
    InvalidTransitionError,
    RoleSubmissionFailedError,
    StepSubmissionFailedError,
)
from recrutas.services.setup_steps import Step, StepKey, step_count, steps_for

logger = logging.getLogger(__name__)

_ROLE_STEP_INDEX = 1
_FIRST_FORM_STEP_INDEX = 2


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class WizardState:
    """Mutable state of one guided setup session.

    Never persisted: leaving the setup page discards it, and a returning
    user starts again at step 1.

    Attributes:
        current_step_index: 1-based index into steps_for(role).
        role: Selected role, or None before the first selection.
        step_data: Form payloads keyed by step, opaque to the controller.
        pending: True while a role or step submission is in flight.
        error: Last submission failure, cleared on the next attempt.
        role_confirmed: True once the account service accepted ``role``.
        completed: True after the last step was submitted.
        redirect_to: Dashboard path once completed.
    """

    current_step_index: int = _ROLE_STEP_INDEX
    role: Role | None = None
    step_data: dict[StepKey, dict[str, Any]] = field(default_factory=dict)
    pending: bool = False
    error: APIError | None = None
    role_confirmed: bool = False
    completed: bool = False
    redirect_to: str | None = None

    @property
    def steps(self) -> tuple[Step, ...]:
        """Active step list for the selected role."""
        return steps_for(self.role)

    @property
    def current_step(self) -> Step:
        """Step shown at current_step_index."""
        return self.steps[self.current_step_index - 1]


# =============================================================================
# Controller
# =============================================================================


class GuidedSetupController:
    """Drives the guided setup wizard for one onboarding session.

    Args:
        gateway: Account gateway used to persist the role and step forms.
        state: Existing state to resume from. A fresh state is created
            when omitted.

    Raises:
        ValueError: If the resumed state points outside its step list.
    """

    def __init__(
        self,
        gateway: AccountGateway,
        state: WizardState | None = None,
    ) -> None:
        if state is None:
            state = WizardState()
        count = step_count(state.role)
        if not _ROLE_STEP_INDEX <= state.current_step_index <= count:
            raise ValueError(
                f"Step index {state.current_step_index} is outside 1..{count}"
            )
        self._gateway = gateway
        self._state = state

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._state.steps

    @property
    def current_step(self) -> Step:
        return self._state.current_step

    @property
    def is_pending(self) -> bool:
        return self._state.pending

    def progress_fraction(self) -> float:
        """Return progress through the active step list.

        Returns:
            current_step_index / len(steps), always in (0, 1].
        """
        return self._state.current_step_index / step_count(self._state.role)

    def step_data(self, step: StepKey) -> dict[str, Any] | None:
        """Return the recorded payload for a step, if any."""
        return self._state.step_data.get(step)

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------

    def _invalid(self, operation: str, reason: str) -> InvalidTransitionError:
        error = InvalidTransitionError(
            operation=operation,
            current_index=self._state.current_step_index,
            step_count=step_count(self._state.role),
            reason=reason,
        )
        logger.info(
            "Setup transition rejected: %s at step %s (%s)",
            operation,
            self._state.current_step_index,
            reason,
        )
        return error

    def _check_navigable(self, operation: str) -> None:
        if self._state.completed:
            raise self._invalid(operation, "setup is already complete")
        if self.is_pending:
            raise self._invalid(operation, "a submission is in progress")

    def _check_can_submit(self, operation: str) -> None:
        if self.is_pending:
            logger.info(
                "Duplicate setup submission rejected: %s at step %s",
                operation,
                self._state.current_step_index,
            )
            raise DuplicateSubmissionError()
        if self._state.completed:
            raise self._invalid(operation, "setup is already complete")

    # -------------------------------------------------------------------------
    # Role selection
    # -------------------------------------------------------------------------

    async def select_role(self, role: Role) -> None:
        """Choose a role and persist it through the gateway.

        Picking a different role than before restarts the step list and
        drops form data gathered for the previous role. The wizard moves to
        step 2 only after the gateway succeeds.

        Args:
            role: Role picked by the user.

        Raises:
            DuplicateSubmissionError: A submission is already pending.
            InvalidTransitionError: Not on the role step, or setup complete.
            RoleSubmissionFailedError: The gateway failed. The wizard stays
                on step 1 with the role kept for a retry.
        """
        self._check_can_submit("select role")
        if self._state.current_step_index != _ROLE_STEP_INDEX:
            raise self._invalid(
                "select role", "the role can only be chosen on the first step"
            )

        if role != self._state.role:
            self._state.role = role
            self._state.role_confirmed = False
            self._state.step_data.clear()

        self._state.pending = True
        self._state.error = None
        logger.info("Submitting setup role %s", role.value)

        try:
            await self._gateway.submit_role(role)
        except RoleSubmissionFailedError as exc:
            self._state.error = exc
            logger.warning(
                "Setup role submission failed: role=%s reason=%s",
                role.value,
                exc.reason,
            )
            raise
        finally:
            self._state.pending = False

        self._state.role_confirmed = True
        self._state.step_data[StepKey.ROLE] = {"role": role.value}
        self._state.current_step_index = _FIRST_FORM_STEP_INDEX
        logger.info("Setup role %s saved", role.value)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def advance(self) -> None:
        """Move to the next step.

        Raises:
            InvalidTransitionError: Already on the last step, the role has not
                been saved yet, a submission is pending, or setup is complete.
        """
        self._check_navigable("advance")
        index = self._state.current_step_index
        if index >= len(self._state.steps):
            raise self._invalid("advance", "already on the last step")
        if index == _ROLE_STEP_INDEX and not self._state.role_confirmed:
            raise self._invalid("advance", "the role has not been saved yet")
        self._state.current_step_index = index + 1

    def retreat(self) -> None:
        """Move back one step.

        Raises:
            InvalidTransitionError: Already on the first step, a submission is
                pending, or setup is complete.
        """
        self._check_navigable("retreat")
        index = self._state.current_step_index
        if index <= _ROLE_STEP_INDEX:
            raise self._invalid("retreat", "already on the first step")
        self._state.current_step_index = index - 1

    def jump_to(self, index: int) -> None:
        """Jump to a step that has already been reached.

        Args:
            index: 1-based target step, at most the current step.

        Raises:
            InvalidTransitionError: Target is ahead of the current step or
                below 1, a submission is pending, or setup is complete.
        """
        self._check_navigable("jump")
        current = self._state.current_step_index
        if index < _ROLE_STEP_INDEX:
            raise self._invalid("jump", f"there is no step {index}")
        if index > current:
            raise self._invalid("jump", f"step {index} has not been reached yet")
        self._state.current_step_index = index

    # -------------------------------------------------------------------------
    # Step forms
    # -------------------------------------------------------------------------

    def record_step_data(self, step: StepKey, payload: Mapping[str, Any]) -> None:
        """Store in-progress form data for a step.

        Args:
            step: Step the data belongs to.
            payload: Form values; stored as a shallow copy.

        Raises:
            ValueError: If the step is not part of the active step list.
        """
        if step not in {s.render_key for s in self._state.steps}:
            raise ValueError(f"Step '{step.value}' is not part of this setup flow")
        self._state.step_data[step] = dict(payload)

    def _finish_current_step(self) -> None:
        role = self._state.role
        # Only form and skippable steps finish, and those exist only once a
        # role is set.
        if role is not None and self._state.current_step_index == len(
            self._state.steps
        ):
            self._state.completed = True
            self._state.redirect_to = dashboard_path(role)
            logger.info(
                "Guided setup completed: role=%s redirect=%s",
                role.value,
                self._state.redirect_to,
            )
        else:
            self._state.current_step_index += 1

    async def submit_step(self, payload: Mapping[str, Any] | BaseModel) -> None:
        """Validate and persist the current step's form, then move on.

        On the last step this completes the wizard instead of advancing.

        Args:
            payload: Raw form values (wire or field names) or a validated
                form schema instance.

        Raises:
            DuplicateSubmissionError: A submission is already pending.
            InvalidTransitionError: The current step has no form, or setup
                is complete.
            ValidationError: The payload fails form validation.
            StepSubmissionFailedError: The gateway failed. The wizard stays
                on the step and the payload is kept for a retry.
        """
        self._check_can_submit("submit")
        step = self._state.current_step
        form_schema = STEP_FORMS.get(step.render_key)
        if form_schema is None:
            raise self._invalid("submit", f"the {step.name} step has no form")

        if isinstance(payload, form_schema):
            form = payload
        else:
            raw = payload.model_dump() if isinstance(payload, BaseModel) else payload
            try:
                form = form_schema.model_validate(raw)
            except PydanticValidationError as exc:
                raise ValidationError(
                    message=f"{step.name} form is invalid",
                    details=[
                        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                        for e in exc.errors()
                    ],
                ) from exc

        self._state.step_data[step.render_key] = form.model_dump()
        self._state.pending = True
        self._state.error = None
        logger.info("Submitting setup step %s", step.render_key.value)

        try:
            await self._gateway.submit_step(step.render_key, form)
        except StepSubmissionFailedError as exc:
            self._state.error = exc
            logger.warning(
                "Setup step submission failed: step=%s reason=%s",
                step.render_key.value,
                exc.reason,
            )
            raise
        finally:
            self._state.pending = False

        self._finish_current_step()

    def skip_step(self) -> None:
        """Skip the current step if it allows it (resume upload).

        Raises:
            InvalidTransitionError: The step cannot be skipped, a submission
                is pending, or setup is complete.
        """
        self._check_navigable("skip")
        step = self._state.current_step
        if not step.skippable:
            raise self._invalid("skip", f"the {step.name} step cannot be skipped")
        self._state.step_data[step.render_key] = {"skipped": True}
        logger.info("Setup step %s skipped", step.render_key.value)
        self._finish_current_step()
