"""Cosmos DB persistence for identity entities."""

from azure.cosmos.exceptions import CosmosHttpResponseError as BackingStoreError

from docidentity.infrastructure.persistence.cosmos.context import CosmosIdentityContext
from docidentity.infrastructure.persistence.cosmos.role_query import RoleQuery
from docidentity.infrastructure.persistence.cosmos.role_store import CosmosRoleStore
from docidentity.infrastructure.persistence.cosmos.session import SessionToken

__all__ = [
    "BackingStoreError",
    "CosmosIdentityContext",
    "CosmosRoleStore",
    "RoleQuery",
    "SessionToken",
]
