"""Tests for the HTTP account gateway.

Uses httpx.MockTransport so requests never leave the process.

Tests verify:
1. Each submission hits the expected method and path with a camelCase body
2. Non-2xx responses (redirects included) become submission errors carrying the server message
3. Transport errors (connection refused, timeout) become submission errors
"""

import json

import httpx
import pytest

from recrutas.adapters.account import HttpAccountGateway
from recrutas.core.config import settings
from recrutas.schemas.onboarding import (
    BasicInfoRequest,
    CompanyProfileRequest,
    SkillsRequest,
)
from recrutas.services.account_role import Role
from recrutas.services.guided_setup import GuidedSetupController
from recrutas.services.setup_errors import (
    RoleSubmissionFailedError,
    StepSubmissionFailedError,
)
from recrutas.services.setup_steps import StepKey

_BASE_URL = "http://accounts.test/api/v1"


def _gateway(handler) -> tuple[HttpAccountGateway, list[httpx.Request]]:
    """Build a gateway whose client records requests and answers with handler."""
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.AsyncClient(
        transport=httpx.MockTransport(record), base_url=_BASE_URL
    )
    return HttpAccountGateway(client=client), seen


def _ok(_request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"data": {"success": True}})


class TestSubmitRole:
    """Tests for submit_role()."""

    async def test_posts_role_to_auth_endpoint(self) -> None:
        gateway, seen = _gateway(_ok)

        await gateway.submit_role(Role.CANDIDATE)

        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/v1/auth/role"
        assert json.loads(seen[0].content) == {"role": "candidate"}

    async def test_error_envelope_message_becomes_reason(self) -> None:
        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={"error": {"code": "VALIDATION_ERROR", "message": "Invalid role"}},
            )

        gateway, _ = _gateway(handler)

        with pytest.raises(RoleSubmissionFailedError) as exc_info:
            await gateway.submit_role(Role.TALENT_OWNER)

        assert exc_info.value.role is Role.TALENT_OWNER
        assert exc_info.value.reason == "Invalid role"
        assert exc_info.value.message == "Failed to save your role. Please try again."

    async def test_non_json_error_uses_status_code(self) -> None:
        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="Service Unavailable")

        gateway, _ = _gateway(handler)

        with pytest.raises(RoleSubmissionFailedError) as exc_info:
            await gateway.submit_role(Role.CANDIDATE)

        assert exc_info.value.reason == "HTTP 503"

    async def test_redirect_is_not_treated_as_saved(self) -> None:
        """A proxy redirect to a login page means the role was never stored."""

        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"location": "/login"})

        gateway, seen = _gateway(handler)
        controller = GuidedSetupController(gateway)

        with pytest.raises(RoleSubmissionFailedError) as exc_info:
            await controller.select_role(Role.CANDIDATE)

        assert exc_info.value.reason == "HTTP 302"
        assert len(seen) == 1
        assert controller.state.current_step_index == 1
        assert controller.state.role_confirmed is False

    async def test_connection_error_becomes_submission_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        gateway, _ = _gateway(handler)

        with pytest.raises(RoleSubmissionFailedError) as exc_info:
            await gateway.submit_role(Role.CANDIDATE)

        assert exc_info.value.reason == "ConnectError: Connection refused"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_timeout_becomes_submission_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        gateway, _ = _gateway(handler)

        with pytest.raises(RoleSubmissionFailedError, match="try again"):
            await gateway.submit_role(Role.CANDIDATE)


class TestSubmitStep:
    """Tests for submit_step()."""

    async def test_info_posts_candidate_profile(self) -> None:
        gateway, seen = _gateway(_ok)

        await gateway.submit_step(
            StepKey.INFO, BasicInfoRequest(first_name="Ada", last_name="Lovelace")
        )

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/v1/candidate/profile"
        assert json.loads(seen[0].content) == {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "summary": "",
        }

    async def test_skills_patches_candidate_profile(self) -> None:
        gateway, seen = _gateway(_ok)

        await gateway.submit_step(StepKey.SKILLS, SkillsRequest(skills=["Python"]))

        assert seen[0].method == "PATCH"
        assert seen[0].url.path == "/api/v1/candidate/profile"
        assert json.loads(seen[0].content) == {"skills": ["Python"]}

    async def test_company_posts_talent_owner_profile(self) -> None:
        gateway, seen = _gateway(_ok)

        await gateway.submit_step(
            StepKey.COMPANY, CompanyProfileRequest(company_name="Acme")
        )

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/v1/talent-owner/profile/complete"
        assert json.loads(seen[0].content)["companyName"] == "Acme"

    async def test_server_error_becomes_step_failure(self) -> None:
        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={"error": {"code": "INVALID_STATE_TRANSITION", "message": "Nope"}},
            )

        gateway, _ = _gateway(handler)

        with pytest.raises(StepSubmissionFailedError) as exc_info:
            await gateway.submit_step(StepKey.SKILLS, SkillsRequest(skills=["Go"]))

        assert exc_info.value.step is StepKey.SKILLS
        assert exc_info.value.reason == "Nope"

    async def test_redirect_becomes_step_failure(self) -> None:
        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(307, headers={"location": "/login"})

        gateway, _ = _gateway(handler)

        with pytest.raises(StepSubmissionFailedError) as exc_info:
            await gateway.submit_step(
                StepKey.COMPANY, CompanyProfileRequest(company_name="Acme")
            )

        assert exc_info.value.reason == "HTTP 307"

    @pytest.mark.parametrize("step", [StepKey.ROLE, StepKey.RESUME])
    async def test_step_without_endpoint_raises_value_error(
        self, step: StepKey
    ) -> None:
        gateway, seen = _gateway(_ok)

        with pytest.raises(ValueError, match="No account endpoint"):
            await gateway.submit_step(step, SkillsRequest(skills=["Go"]))

        assert seen == []


class TestDefaults:
    """Tests for settings-backed defaults."""

    def test_uses_configured_base_url_and_timeout(self) -> None:
        gateway = HttpAccountGateway()
        assert gateway._base_url == settings.account_api_base_url
        assert gateway._timeout == settings.account_api_timeout_seconds

    def test_explicit_values_override_settings(self) -> None:
        gateway = HttpAccountGateway(base_url=_BASE_URL, timeout=2.5)
        assert gateway._base_url == _BASE_URL
        assert gateway._timeout == 2.5
