"""Repository for User operations.

Provides database access for the users table: lookup, creation, and the
two updates guided setup performs (role and name).
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recrutas.models.user import User
from recrutas.services.account_role import Role


class UserRepository:
    """Stateless repository for User table operations.

    All methods are static with no instance state. Pass an AsyncSession
    for every call so the caller controls transaction boundaries.
    """

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: uuid.UUID) -> User | None:
        """Fetch a user by primary key.

        Args:
            db: Async database session.
            user_id: UUID primary key.

        Returns:
            User if found, None otherwise.
        """
        return await db.get(User, user_id)

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> User | None:
        """Fetch a user by email address (case-insensitive)."""
        stmt = select(User).where(User.email == email.lower())
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        email: str,
        user_id: uuid.UUID | None = None,
    ) -> User:
        """Create a new user without a role.

        Email is normalized to lowercase before storage.

        Args:
            db: Async database session.
            email: User email address.
            user_id: Explicit primary key (local-first default user).

        Returns:
            Created User.

        Raises:
            sqlalchemy.exc.IntegrityError: If email already exists.
        """
        user = User(email=email.lower())
        if user_id is not None:
            user.id = user_id
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    @staticmethod
    async def set_role(db: AsyncSession, user: User, role: Role) -> User:
        """Persist the user's account role.

        Args:
            db: Async database session.
            user: User to update.
            role: Role chosen during guided setup.

        Returns:
            The updated user.
        """
        user.role = role.value
        await db.flush()
        return user

    @staticmethod
    async def set_name(
        db: AsyncSession,
        user: User,
        *,
        first_name: str,
        last_name: str,
    ) -> User:
        """Store the name given on the Info step."""
        user.first_name = first_name
        user.last_name = last_name
        await db.flush()
        return user
