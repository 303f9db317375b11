"""Shared dependencies for API endpoints.

Local-first mode uses DEFAULT_USER_ID; hosted mode validates a JWT from the
session cookie. Issuing tokens belongs to the auth provider, not this service.

WHY DEPENDENCY INJECTION:
- Consistent auth across all endpoints
- Easy to swap implementations (local → hosted)
- Testable with overridden dependencies
"""

import uuid
from typing import Annotated

import jwt
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from recrutas.core.config import settings
from recrutas.core.database import get_db
from recrutas.core.errors import InvalidStateError, UnauthorizedError
from recrutas.models import User
from recrutas.repositories.user_repository import UserRepository
from recrutas.services.account_role import Role


async def get_current_user_id(request: Request) -> uuid.UUID:
    """Get current user ID from auth context.

    Validation steps (hosted mode):
    1. Read JWT from cookie
    2. Decode + verify signature (HS256)
    3. Verify exp, aud, iss claims
    4. Extract sub as UUID

    Args:
        request: HTTP request (injected by FastAPI).

    Returns:
        UUID of the current authenticated user.

    Raises:
        UnauthorizedError: For any auth failure. The message never says why.
    """
    if not settings.auth_enabled:
        if settings.default_user_id is None:
            raise UnauthorizedError()
        return settings.default_user_id

    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise UnauthorizedError()

    try:
        payload = jwt.decode(
            token,
            settings.auth_secret.get_secret_value(),
            algorithms=["HS256"],
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
        )
        return uuid.UUID(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError) as exc:
        raise UnauthorizedError() from exc


async def get_current_user(
    user_id: Annotated[uuid.UUID, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Get full User object for current user.

    Raises:
        UnauthorizedError: If the user no longer exists.
    """
    user = await UserRepository.get_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError()
    return user


def require_role(user: User, role: Role) -> None:
    """Reject profile writes from users who picked a different role.

    Args:
        user: Current user.
        role: Role the endpoint belongs to.

    Raises:
        InvalidStateError: If the user's role is unset or differs.
    """
    if user.role != role.value:
        raise InvalidStateError(
            f"This step is only available to users with the {role.value} role."
        )


# Reusable type aliases for dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
