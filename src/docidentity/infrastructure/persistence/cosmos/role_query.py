"""Lazy, restartable query over the role container."""

import dataclasses
from collections.abc import AsyncIterator
from typing import Any, Generic

from docidentity.application.ports import TRole
from docidentity.domain.exceptions import InvalidArgument, ObjectDisposed
from docidentity.infrastructure.persistence.cosmos.context import CosmosIdentityContext
from docidentity.infrastructure.persistence.cosmos.role_document import (
    document_key,
    role_from_document,
)


class RoleQuery(Generic[TRole]):
    """Roles matching a set of equality filters.

    Nothing is sent until the query is iterated, and every iteration runs a
    fresh query against the container. Results are not cached.
    """

    def __init__(
        self,
        context: CosmosIdentityContext,
        role_type: type[TRole],
        filters: tuple[tuple[str, Any], ...] = (),
        max_item_count: int | None = None,
    ) -> None:
        self._context = context
        self._role_type = role_type
        self._filters = filters
        self._max_item_count = max_item_count

    def where(self, field_name: str, value: Any) -> "RoleQuery[TRole]":
        """New query with an extra ``field == value`` condition."""
        keys = {f.name: document_key(f) for f in dataclasses.fields(self._role_type)}
        if field_name not in keys:
            raise InvalidArgument(
                f"{self._role_type.__name__} has no field {field_name!r}"
            )
        return RoleQuery(
            self._context,
            self._role_type,
            self._filters + ((keys[field_name], value),),
            self._max_item_count,
        )

    def page_size(self, max_item_count: int) -> "RoleQuery[TRole]":
        """New query fetching at most ``max_item_count`` documents per page."""
        return RoleQuery(self._context, self._role_type, self._filters, max_item_count)

    def build(self) -> tuple[str, list[dict[str, Any]]]:
        """SQL text and parameters for the current filters."""
        query = "SELECT * FROM c"
        parameters: list[dict[str, Any]] = []
        conditions = []
        for i, (key, value) in enumerate(self._filters):
            name = f"@p{i}"
            conditions.append(f'c["{key}"] = {name}')
            parameters.append({"name": name, "value": value})
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        return query, parameters

    async def __aiter__(self) -> AsyncIterator[TRole]:
        if self._context.closed:
            raise ObjectDisposed(type(self._context).__name__)
        query, parameters = self.build()
        kwargs: dict[str, Any] = dict(self._context.request_options())
        if self._max_item_count is not None:
            kwargs["max_item_count"] = self._max_item_count
        items = self._context.role_container.query_items(
            query=query, parameters=parameters, **kwargs
        )
        async for document in items:
            yield role_from_document(self._role_type, document)

    async def first(self) -> TRole | None:
        """First matching role, or None."""
        iterator = self.__aiter__()
        try:
            return await anext(iterator)
        except StopAsyncIteration:
            return None
        finally:
            await iterator.aclose()

    async def to_list(self) -> list[TRole]:
        """All matching roles."""
        return [role async for role in self]
