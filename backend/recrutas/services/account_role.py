"""Account role values.

A user's role decides which dashboard they land on and which guided setup
steps they see. The role is chosen once, on the first setup step, and then
persisted as the user's permanent account type.

An unset role is represented by ``None`` rather than a third enum member:
"unset" is never stored or sent over the wire.
"""

from enum import Enum


class Role(Enum):
    """Account type selected during guided setup.

    Values match the wire format of POST /auth/role and the users.role
    check constraint.
    """

    CANDIDATE = "candidate"
    TALENT_OWNER = "talent_owner"

    @classmethod
    def from_string(cls, value: str) -> "Role":
        """Convert a wire/database string to enum.

        Args:
            value: Role string, e.g. "candidate".

        Returns:
            The corresponding Role enum value.

        Raises:
            ValueError: If the string doesn't match any role.
        """
        for role in cls:
            if role.value == value:
                return role
        valid = [r.value for r in cls]
        raise ValueError(f"Invalid role: '{value}'. Valid: {valid}")


DASHBOARD_PATHS: dict[Role, str] = {
    Role.CANDIDATE: "/candidate-dashboard",
    Role.TALENT_OWNER: "/talent-dashboard",
}
"""Where the surrounding application routes a user once setup is done."""


def dashboard_path(role: Role) -> str:
    """Return the dashboard route for a role."""
    return DASHBOARD_PATHS[role]
