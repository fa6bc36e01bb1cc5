"""Domain entities."""

from docidentity.domain.entities.role import IdentityRole
from docidentity.domain.entities.user_role import IdentityUserRole

__all__ = [
    "IdentityRole",
    "IdentityUserRole",
]
