"""Repositories for guided setup profiles.

CandidateProfileRepository and CompanyProfileRepository upsert the
one-per-user profile rows written by the Info, Skills and Company steps.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recrutas.models.profile import CandidateProfile, CompanyProfile


class CandidateProfileRepository:
    """Stateless repository for candidate_profiles."""

    @staticmethod
    async def get_by_user_id(
        db: AsyncSession, user_id: uuid.UUID
    ) -> CandidateProfile | None:
        """Fetch the candidate profile owned by a user.

        Args:
            db: Async database session.
            user_id: Owning user's UUID.

        Returns:
            CandidateProfile if one exists, None otherwise.
        """
        stmt = select(CandidateProfile).where(CandidateProfile.user_id == user_id)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def _get_or_create(
        db: AsyncSession, user_id: uuid.UUID
    ) -> CandidateProfile:
        profile = await CandidateProfileRepository.get_by_user_id(db, user_id)
        if profile is None:
            profile = CandidateProfile(user_id=user_id, summary="", skills=[])
            db.add(profile)
        return profile

    @staticmethod
    async def save_summary(
        db: AsyncSession, user_id: uuid.UUID, summary: str
    ) -> CandidateProfile:
        """Create or update the headline for a candidate."""
        profile = await CandidateProfileRepository._get_or_create(db, user_id)
        profile.summary = summary
        await db.flush()
        await db.refresh(profile)
        return profile

    @staticmethod
    async def save_skills(
        db: AsyncSession, user_id: uuid.UUID, skills: list[str]
    ) -> CandidateProfile:
        """Store the candidate's skills and mark the profile complete.

        Args:
            db: Async database session.
            user_id: Owning user's UUID.
            skills: Normalized skill names.

        Returns:
            The updated profile.
        """
        profile = await CandidateProfileRepository._get_or_create(db, user_id)
        # WHY new list: JSON columns only detect reassignment, not mutation.
        profile.skills = list(skills)
        profile.is_complete = True
        await db.flush()
        await db.refresh(profile)
        return profile


class CompanyProfileRepository:
    """Stateless repository for company_profiles."""

    @staticmethod
    async def get_by_user_id(
        db: AsyncSession, user_id: uuid.UUID
    ) -> CompanyProfile | None:
        """Fetch the company profile owned by a user."""
        stmt = select(CompanyProfile).where(CompanyProfile.user_id == user_id)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def complete(
        db: AsyncSession,
        user_id: uuid.UUID,
        *,
        company_name: str,
        website: str,
        company_size: str,
    ) -> CompanyProfile:
        """Create or update the company profile and mark it complete.

        Args:
            db: Async database session.
            user_id: Owning user's UUID.
            company_name: Required company name.
            website: Company website (may be empty).
            company_size: Free-form size description (may be empty).

        Returns:
            The saved profile.
        """
        profile = await CompanyProfileRepository.get_by_user_id(db, user_id)
        if profile is None:
            profile = CompanyProfile(user_id=user_id, company_name=company_name)
            db.add(profile)
        profile.company_name = company_name
        profile.website = website
        profile.company_size = company_size
        profile.is_complete = True
        await db.flush()
        await db.refresh(profile)
        return profile
