"""Canonical storage key for roles."""

import hashlib
from dataclasses import dataclass

from docidentity.domain.exceptions import InvalidArgument

ROLE_KEY_PREFIX = "R_"


@dataclass(frozen=True)
class RoleKey:
    """Deterministic document id derived from a role name.

    Names are upper-cased before hashing, so keys are case-insensitive.
    """

    value: str

    @classmethod
    def from_name(cls, role_name: str | None) -> "RoleKey":
        if not role_name:
            raise InvalidArgument("role_name is required")
        digest = hashlib.sha1(role_name.upper().encode("utf-8")).hexdigest()
        return cls(value=f"{ROLE_KEY_PREFIX}{digest}")

    def __str__(self) -> str:
        return self.value


def derive_role_key(role_name: str | None) -> str:
    """Canonical key string for a role name."""
    return RoleKey.from_name(role_name).value
