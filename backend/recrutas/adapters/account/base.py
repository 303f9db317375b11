"""Abstract base class for the account gateway.

The guided setup controller never talks HTTP directly. It calls an
AccountGateway, which persists the chosen role and each step's form data
and reports failure by raising.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from recrutas.services.account_role import Role
from recrutas.services.setup_steps import StepKey


class AccountGateway(ABC):
    """Persistence boundary for guided setup submissions.

    WHY ABSTRACT CLASS:
    - The controller depends on the asynchronous success/failure contract,
      not on a transport
    - Tests swap in an in-memory fake without patching httpx
    """

    @abstractmethod
    async def submit_role(self, role: Role) -> None:
        """Persist the user's account role.

        Args:
            role: Role picked on the first setup step.

        Raises:
            RoleSubmissionFailedError: On network, auth, or server failure.
        """
        ...

    @abstractmethod
    async def submit_step(self, step: StepKey, form: BaseModel) -> None:
        """Persist a validated setup step form.

        Args:
            step: Step the form belongs to.
            form: Validated form schema instance.

        Raises:
            StepSubmissionFailedError: On network, auth, or server failure.
        """
        ...
