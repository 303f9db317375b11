"""Guided setup status for returning users.

The wizard itself keeps no server-side progress. When a user comes back,
the account service reports whether setup is already done so the web
client can send them straight to their dashboard instead of step 1.
"""

from dataclasses import dataclass

from recrutas.services.account_role import Role, dashboard_path

GUIDED_SETUP_PATH = "/guided-setup"


@dataclass(frozen=True)
class SetupStatus:
    """Where a user belongs in the setup lifecycle.

    Attributes:
        role: Persisted role, or None if never chosen.
        setup_complete: True once the role's profile step was completed.
        redirect_to: Dashboard path when complete, else the setup page.
    """

    role: Role | None
    setup_complete: bool
    redirect_to: str


def resolve_setup_status(role: Role | None, profile_complete: bool) -> SetupStatus:
    """Decide whether a user still needs guided setup.

    Args:
        role: The user's persisted role.
        profile_complete: Whether the profile for that role is complete.
            Ignored when no role is set.

    Returns:
        SetupStatus for the user.
    """
    if role is None or not profile_complete:
        return SetupStatus(
            role=role, setup_complete=False, redirect_to=GUIDED_SETUP_PATH
        )
    return SetupStatus(role=role, setup_complete=True, redirect_to=dashboard_path(role))
