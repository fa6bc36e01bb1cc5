"""Application ports - interfaces for external adapters."""

from docidentity.application.ports.role_container import RoleContainer
from docidentity.application.ports.role_store import RoleStore, TRole

__all__ = [
    "RoleContainer",
    "RoleStore",
    "TRole",
]
