"""SQLAlchemy ORM models for Recrutas.

All models are exported from this module for convenient imports:
    from recrutas.models import User, CandidateProfile, CompanyProfile

Models are organized by domain:
- user.py: User (account identity and role)
- profile.py: CandidateProfile, CompanyProfile (guided setup profiles)
"""

from recrutas.models.base import Base, TimestampMixin
from recrutas.models.profile import CandidateProfile, CompanyProfile
from recrutas.models.user import User

__all__ = [
    "Base",
    "CandidateProfile",
    "CompanyProfile",
    "TimestampMixin",
    "User",
]
