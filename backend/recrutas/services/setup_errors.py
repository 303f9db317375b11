"""Guided setup error types.

Error Handling Strategy:
    - Invalid navigation: reject, leave wizard state unchanged
    - Duplicate submission: reject synchronously, no network call issued
    - Role/step submission failure: stay on the current step, keep the
      user's input, surface the message so the user can retry

None of these end the session. The worst case is a user parked on the
role step with a retry affordance.

Each error subclasses APIError so the presentation layer can render it
with the same envelope the account service uses.
"""

from recrutas.core.errors import APIError
from recrutas.services.account_role import Role
from recrutas.services.setup_steps import StepKey


class InvalidTransitionError(APIError):
    """Raised when a navigation precondition does not hold.

    Attributes:
        operation: Navigation operation name (e.g. "advance").
        current_index: 1-based step index at the time of the call.
        step_count: Length of the active step list.
    """

    def __init__(
        self,
        operation: str,
        current_index: int,
        step_count: int,
        reason: str,
    ) -> None:
        self.operation = operation
        self.current_index = current_index
        self.step_count = step_count
        super().__init__(
            code="INVALID_STEP_TRANSITION",
            message=(
                f"Cannot {operation} from step {current_index} of {step_count}: "
                f"{reason}"
            ),
            status_code=422,
        )


class DuplicateSubmissionError(APIError):
    """Raised when a submission is requested while another is in flight."""

    def __init__(self) -> None:
        super().__init__(
            code="DUPLICATE_SUBMISSION",
            message="A submission is already in progress.",
            status_code=409,
        )


class RoleSubmissionFailedError(APIError):
    """Raised when persisting the selected role fails.

    The user-facing message matches the toast shown by the setup page; the
    server or transport reason is kept separately for logging.

    Attributes:
        role: The role that failed to persist.
        reason: Underlying failure description.
    """

    USER_MESSAGE = "Failed to save your role. Please try again."

    def __init__(self, role: Role, reason: str) -> None:
        self.role = role
        self.reason = reason
        super().__init__(
            code="ROLE_SUBMISSION_FAILED",
            message=self.USER_MESSAGE,
            status_code=502,
            details=[{"role": role.value, "reason": reason}],
        )


class StepSubmissionFailedError(APIError):
    """Raised when submitting a setup step's form fails.

    Attributes:
        step: The step whose submission failed.
        reason: Underlying failure description.
    """

    def __init__(self, step: StepKey, reason: str) -> None:
        self.step = step
        self.reason = reason
        super().__init__(
            code="STEP_SUBMISSION_FAILED",
            message="Failed to save your information. Please try again.",
            status_code=502,
            details=[{"step": step.value, "reason": reason}],
        )
