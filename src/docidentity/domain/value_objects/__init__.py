"""Domain value objects."""

from docidentity.domain.value_objects.role_key import RoleKey, derive_role_key

__all__ = [
    "RoleKey",
    "derive_role_key",
]
