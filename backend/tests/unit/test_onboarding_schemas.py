"""Tests for guided setup request schemas.

Tests verify:
1. Wire (camelCase) and field names are both accepted
2. Required text is stripped and must not be blank
3. Skills are normalized and bounded to 1..10
4. Unknown fields are rejected
"""

import pytest
from pydantic import ValidationError

from recrutas.schemas.onboarding import (
    MAX_SKILLS,
    STEP_FORMS,
    BasicInfoRequest,
    CompanyProfileRequest,
    RoleSelectionRequest,
    SkillsRequest,
)
from recrutas.services.setup_steps import StepKey


class TestRoleSelectionRequest:
    """Tests for RoleSelectionRequest."""

    def test_accepts_any_short_string(self) -> None:
        """Role membership is checked by the endpoint, not the schema."""
        assert RoleSelectionRequest(role="admin").role == "admin"

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            RoleSelectionRequest.model_validate({"role": "candidate", "admin": True})

    def test_rejects_overlong_role(self) -> None:
        with pytest.raises(ValidationError):
            RoleSelectionRequest(role="x" * 33)


class TestBasicInfoRequest:
    """Tests for BasicInfoRequest."""

    def test_accepts_wire_names(self) -> None:
        form = BasicInfoRequest.model_validate(
            {"firstName": "Ada", "lastName": "Lovelace", "summary": "Engineer"}
        )
        assert form.first_name == "Ada"
        assert form.last_name == "Lovelace"
        assert form.summary == "Engineer"

    def test_accepts_field_names(self) -> None:
        form = BasicInfoRequest(first_name="Ada", last_name="Lovelace")
        assert form.summary == ""

    def test_strips_whitespace(self) -> None:
        form = BasicInfoRequest.model_validate(
            {"firstName": "  Ada ", "lastName": " Lovelace  ", "summary": " x "}
        )
        assert (form.first_name, form.last_name, form.summary) == (
            "Ada",
            "Lovelace",
            "x",
        )

    def test_blank_first_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="First name is required"):
            BasicInfoRequest.model_validate({"firstName": "   ", "lastName": "L"})

    def test_blank_last_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Last name is required"):
            BasicInfoRequest.model_validate({"firstName": "Ada", "lastName": ""})

    def test_dumps_wire_names_by_alias(self) -> None:
        form = BasicInfoRequest(first_name="Ada", last_name="Lovelace")
        assert form.model_dump(by_alias=True) == {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "summary": "",
        }


class TestSkillsRequest:
    """Tests for SkillsRequest normalization."""

    def test_trims_and_drops_blanks(self) -> None:
        form = SkillsRequest(skills=[" Python ", "", "   ", "SQL"])
        assert form.skills == ["Python", "SQL"]

    def test_deduplicates_case_insensitively(self) -> None:
        """First spelling wins."""
        form = SkillsRequest(skills=["React", "react", "REACT", "Go"])
        assert form.skills == ["React", "Go"]

    def test_empty_list_rejected(self) -> None:
        with pytest.raises(ValidationError, match="At least one skill is required"):
            SkillsRequest(skills=[])

    def test_only_blank_skills_rejected(self) -> None:
        with pytest.raises(ValidationError, match="At least one skill is required"):
            SkillsRequest(skills=["", "  "])

    def test_max_skills_accepted(self) -> None:
        form = SkillsRequest(skills=[f"skill-{i}" for i in range(MAX_SKILLS)])
        assert len(form.skills) == MAX_SKILLS

    def test_more_than_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Add up to 10 skills"):
            SkillsRequest(skills=[f"skill-{i}" for i in range(MAX_SKILLS + 1)])

    def test_duplicates_do_not_count_toward_limit(self) -> None:
        skills = [f"skill-{i}" for i in range(MAX_SKILLS)] + ["SKILL-0"]
        assert len(SkillsRequest(skills=skills).skills) == MAX_SKILLS

    def test_overlong_skill_rejected(self) -> None:
        with pytest.raises(ValidationError, match="limited to 100 characters"):
            SkillsRequest(skills=["x" * 101])


class TestCompanyProfileRequest:
    """Tests for CompanyProfileRequest."""

    def test_accepts_wire_names(self) -> None:
        form = CompanyProfileRequest.model_validate(
            {"companyName": " Acme ", "website": "https://acme.test", "companySize": "11-50"}
        )
        assert form.company_name == "Acme"
        assert form.company_size == "11-50"

    def test_optional_fields_default_empty(self) -> None:
        form = CompanyProfileRequest(company_name="Acme")
        assert form.website == ""
        assert form.company_size == ""

    def test_blank_company_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Company name is required"):
            CompanyProfileRequest.model_validate({"companyName": "  "})

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            CompanyProfileRequest.model_validate({"companyName": "Acme", "ceo": "Bob"})


class TestStepForms:
    """Tests for the step-to-form mapping."""

    def test_form_steps(self) -> None:
        assert STEP_FORMS == {
            StepKey.INFO: BasicInfoRequest,
            StepKey.SKILLS: SkillsRequest,
            StepKey.COMPANY: CompanyProfileRequest,
        }

    @pytest.mark.parametrize("step", [StepKey.ROLE, StepKey.RESUME])
    def test_role_and_resume_have_no_form(self, step: StepKey) -> None:
        assert step not in STEP_FORMS
