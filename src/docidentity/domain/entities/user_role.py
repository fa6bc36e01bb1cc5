"""User-role link record."""

from dataclasses import dataclass


@dataclass
class IdentityUserRole:
    """Binds a user to a role. Held on the role, never stored on its own."""

    user_id: str
    role_id: str
