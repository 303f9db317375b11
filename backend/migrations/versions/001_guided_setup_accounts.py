"""Create account tables: users, candidate_profiles, company_profiles.

Revision ID: 001_guided_setup_accounts
Revises:
Create Date: 2026-10-18

users.role stays NULL until guided setup persists it.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001_guided_setup_accounts"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "role IN ('candidate', 'talent_owner')",
            name="ck_users_role",
        ),
    )
    op.create_index("idx_user_email", "users", ["email"], unique=True)

    op.create_table(
        "candidate_profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("summary", sa.String(255), nullable=False, server_default=""),
        sa.Column("skills", sa.JSON(), nullable=False),
        sa.Column(
            "is_complete", sa.Boolean(), nullable=False, server_default="false"
        ),
        *_timestamps(),
    )
    op.create_index(
        "idx_candidate_profile_user", "candidate_profiles", ["user_id"], unique=True
    )

    op.create_table(
        "company_profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("company_name", sa.String(100), nullable=False),
        sa.Column("website", sa.String(500), nullable=False, server_default=""),
        sa.Column("company_size", sa.String(50), nullable=False, server_default=""),
        sa.Column(
            "is_complete", sa.Boolean(), nullable=False, server_default="false"
        ),
        *_timestamps(),
    )
    op.create_index(
        "idx_company_profile_user", "company_profiles", ["user_id"], unique=True
    )


def downgrade() -> None:
    op.drop_index("idx_company_profile_user", table_name="company_profiles")
    op.drop_table("company_profiles")
    op.drop_index("idx_candidate_profile_user", table_name="candidate_profiles")
    op.drop_table("candidate_profiles")
    op.drop_index("idx_user_email", table_name="users")
    op.drop_table("users")
