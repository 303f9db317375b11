"""HTTP account gateway.

Submits guided setup data to the account service over REST:

- role    → POST  /auth/role
- info    → POST  /candidate/profile
- skills  → PATCH /candidate/profile
- company → POST  /talent-owner/profile/complete

Every transport error (connection refused, timeout, ...) and every non-2xx
response is converted into the matching submission error. No retries:
the user re-triggers the submission after seeing the error.
"""

from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from recrutas.adapters.account.base import AccountGateway
from recrutas.core.config import settings
from recrutas.services.account_role import Role
from recrutas.services.setup_errors import (
    RoleSubmissionFailedError,
    StepSubmissionFailedError,
)
from recrutas.services.setup_steps import StepKey

logger = structlog.get_logger()

_ROLE_PATH = "/auth/role"

# WHY (method, path) per step: the candidate profile is created with POST
# and then extended with PATCH, matching the account service routes.
_STEP_ENDPOINTS: dict[StepKey, tuple[str, str]] = {
    StepKey.INFO: ("POST", "/candidate/profile"),
    StepKey.SKILLS: ("PATCH", "/candidate/profile"),
    StepKey.COMPANY: ("POST", "/talent-owner/profile/complete"),
}


def _failure_reason(response: httpx.Response) -> str:
    """Extract a readable reason from an error response.

    Prefers the message from the {"error": {...}} envelope and falls back to
    the status code when the body is not JSON or has another shape.
    """
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"HTTP {response.status_code}"


def _transport_reason(exc: httpx.HTTPError) -> str:
    detail = str(exc)
    if detail:
        return f"{type(exc).__name__}: {detail}"
    return type(exc).__name__


class HttpAccountGateway(AccountGateway):
    """Account gateway backed by httpx.

    Args:
        base_url: Account API base URL (defaults to settings).
        timeout: Transport timeout in seconds (defaults to settings).
        cookies: Session cookies forwarded with every request.
        client: Pre-configured client. When given, the caller owns its
            lifecycle and base_url/timeout/cookies are ignored.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        cookies: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url or settings.account_api_base_url
        self._timeout = timeout or settings.account_api_timeout_seconds
        self._cookies = cookies
        self._client = client

    async def _send(
        self, method: str, path: str, body: dict[str, Any]
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, path, json=body)

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            cookies=self._cookies,
        ) as client:
            return await client.request(method, path, json=body)

    async def submit_role(self, role: Role) -> None:
        """POST the role to the account service.

        Raises:
            RoleSubmissionFailedError: On transport error or non-2xx status.
        """
        try:
            response = await self._send("POST", _ROLE_PATH, {"role": role.value})
        except httpx.HTTPError as exc:
            logger.warning(
                "Account API unreachable", path=_ROLE_PATH, error=type(exc).__name__
            )
            raise RoleSubmissionFailedError(role, _transport_reason(exc)) from exc

        if not response.is_success:
            logger.warning(
                "Account API rejected role",
                status_code=response.status_code,
                role=role.value,
            )
            raise RoleSubmissionFailedError(role, _failure_reason(response))

    async def submit_step(self, step: StepKey, form: BaseModel) -> None:
        """Send a step form to its endpoint.

        Raises:
            ValueError: If the step has no endpoint (role/resume).
            StepSubmissionFailedError: On transport error or non-2xx status.
        """
        endpoint = _STEP_ENDPOINTS.get(step)
        if endpoint is None:
            raise ValueError(f"No account endpoint for setup step '{step.value}'")
        method, path = endpoint

        try:
            response = await self._send(method, path, form.model_dump(by_alias=True))
        except httpx.HTTPError as exc:
            logger.warning(
                "Account API unreachable", path=path, error=type(exc).__name__
            )
            raise StepSubmissionFailedError(step, _transport_reason(exc)) from exc

        if not response.is_success:
            logger.warning(
                "Account API rejected setup step",
                status_code=response.status_code,
                step=step.value,
            )
            raise StepSubmissionFailedError(step, _failure_reason(response))
