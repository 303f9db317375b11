"""Role-specific profile models filled in by guided setup.

- CandidateProfile: headline and skills (Info + Skills steps)
- CompanyProfile: company details (Company step)

Both are one-to-one with users and carry an is_complete flag that the
account service uses to decide whether a returning user still needs setup.
"""

import uuid

from sqlalchemy import JSON, Boolean, ForeignKey, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from recrutas.models.base import Base, TimestampMixin

_USER_FK = "users.id"
_CASCADE = "CASCADE"


class CandidateProfile(Base, TimestampMixin):
    """Candidate profile.

    Attributes:
        id: UUID primary key.
        user_id: Owning user (unique).
        summary: Headline, e.g. "Senior Frontend Developer".
        skills: Up to 10 skill names.
        is_complete: Set when the Skills step is submitted.
    """

    __tablename__ = "candidate_profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey(_USER_FK, ondelete=_CASCADE),
        unique=True,
        nullable=False,
    )
    summary: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
    skills: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    is_complete: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default=text("false"),
        default=False,
    )


class CompanyProfile(Base, TimestampMixin):
    """Talent owner's company profile.

    Attributes:
        id: UUID primary key.
        user_id: Owning user (unique).
        company_name: Required company name.
        website: Optional company website.
        company_size: Free-form size, e.g. "1-10 employees".
        is_complete: Set when the Company step is submitted.
    """

    __tablename__ = "company_profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey(_USER_FK, ondelete=_CASCADE),
        unique=True,
        nullable=False,
    )
    company_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    website: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )
    company_size: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
    )
    is_complete: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default=text("false"),
        default=False,
    )
