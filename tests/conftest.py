"""Pytest fixtures for docidentity tests."""

from __future__ import annotations

import re
from collections.abc import AsyncIterator
from copy import deepcopy
from typing import Any

import pytest
from azure.cosmos.exceptions import (
    CosmosResourceExistsError,
    CosmosResourceNotFoundError,
)

from docidentity.infrastructure.persistence.cosmos import (
    CosmosIdentityContext,
    CosmosRoleStore,
)

SESSION_TOKEN = "0:-1#12"

_CONDITION = re.compile(r'c\["(\w+)"\] = (@p\d+)')


# --- Fake Cosmos client ---


class FakeRoleContainer:
    """In-memory container with Cosmos-style system properties and errors."""

    def __init__(self, session_token: str = SESSION_TOKEN) -> None:
        self._documents: dict[str, dict[str, Any]] = {}
        self._counter = 0
        self.session_token = session_token
        self.calls: list[str] = []
        self.options: list[dict[str, Any]] = []
        self.queries: list[tuple[str, list[dict[str, Any]]]] = []
        self.create_error: Exception | None = None

    def _headers(self) -> dict[str, str]:
        return {"x-ms-session-token": self.session_token}

    async def create_item(
        self, body: dict[str, Any], *, response_hook=None, **kwargs: Any
    ) -> dict[str, Any]:
        self.calls.append("create_item")
        self.options.append(kwargs)
        if self.create_error is not None:
            raise self.create_error
        if body["id"] in self._documents:
            raise CosmosResourceExistsError(
                status_code=409,
                message="Entity with the specified id already exists in the system.",
            )
        self._counter += 1
        rid = f"rid{self._counter}"
        document = deepcopy(body)
        document.update(
            {
                "_rid": rid,
                "_self": f"dbs/identity/colls/roles/docs/{rid}/",
                "_etag": f'"etag-{self._counter}"',
                "_ts": 1700000000 + self._counter,
            }
        )
        self._documents[document["id"]] = document
        if response_hook:
            response_hook(self._headers(), deepcopy(document))
        return deepcopy(document)

    async def delete_item(
        self, item: str | dict[str, Any], partition_key: Any, *, response_hook=None, **kwargs: Any
    ) -> None:
        self.calls.append("delete_item")
        self.options.append(kwargs)
        key = item["id"] if isinstance(item, dict) else item
        if key not in self._documents or partition_key != key:
            raise CosmosResourceNotFoundError(
                status_code=404,
                message="Entity with the specified id does not exist in the system.",
            )
        del self._documents[key]
        if response_hook:
            response_hook(self._headers(), None)

    def query_items(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
        max_item_count: int | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[dict[str, Any]]:
        self.calls.append("query_items")
        self.options.append(dict(kwargs, max_item_count=max_item_count))
        self.queries.append((query, parameters or []))
        return self._run_query(query, parameters or [])

    async def _run_query(
        self, query: str, parameters: list[dict[str, Any]]
    ) -> AsyncIterator[dict[str, Any]]:
        values = {p["name"]: p["value"] for p in parameters}
        conditions = _CONDITION.findall(query)
        for document in list(self._documents.values()):
            if all(document.get(key) == values[name] for key, name in conditions):
                yield deepcopy(document)

    def add_document(self, document: dict[str, Any]) -> None:
        """Helper to seed a stored document for tests."""
        self._documents[document["id"]] = deepcopy(document)

    def document(self, key: str) -> dict[str, Any] | None:
        return deepcopy(self._documents.get(key))

    def remote_calls(self) -> int:
        return len(self.calls)


class FakeDatabase:
    def __init__(self, container: FakeRoleContainer) -> None:
        self._container = container
        self.created_containers: list[tuple[str, Any]] = []

    def get_container_client(self, container: str) -> FakeRoleContainer:
        return self._container

    async def create_container_if_not_exists(self, id: str, partition_key: Any, **kwargs: Any):
        self.created_containers.append((id, partition_key))
        return self._container


class FakeCosmosClient:
    """Stands in for azure.cosmos.aio.CosmosClient."""

    def __init__(self, container: FakeRoleContainer | None = None) -> None:
        self.container = container or FakeRoleContainer()
        self.database = FakeDatabase(self.container)
        self.created_databases: list[str] = []
        self.close_count = 0

    def get_database_client(self, database: str) -> FakeDatabase:
        return self.database

    async def create_database_if_not_exists(self, id: str, **kwargs: Any) -> FakeDatabase:
        self.created_databases.append(id)
        return self.database

    async def close(self) -> None:
        self.close_count += 1


# --- Fixtures ---


@pytest.fixture
def cosmos_client() -> FakeCosmosClient:
    """Fresh in-memory Cosmos client for each test."""
    return FakeCosmosClient()


@pytest.fixture
def container(cosmos_client: FakeCosmosClient) -> FakeRoleContainer:
    return cosmos_client.container


@pytest.fixture
def context(cosmos_client: FakeCosmosClient) -> CosmosIdentityContext:
    return CosmosIdentityContext(
        cosmos_client, database_name="identity", role_container_name="roles"
    )


@pytest.fixture
def role_store(context: CosmosIdentityContext) -> CosmosRoleStore:
    return CosmosRoleStore(context)
