"""Role container port - the backing document collection."""

from collections.abc import AsyncIterable
from typing import Any, Protocol


class RoleContainer(Protocol):
    """Document operations the role store issues.

    Satisfied by ``azure.cosmos.aio.ContainerProxy``. Every call accepts a
    ``response_hook(headers, body)`` keyword and request options such as
    ``session_token``.
    """

    async def create_item(self, body: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...

    async def delete_item(
        self, item: str | dict[str, Any], partition_key: Any, **kwargs: Any
    ) -> None: ...

    def query_items(
        self, query: str, **kwargs: Any
    ) -> AsyncIterable[dict[str, Any]]: ...
