"""Role store port - the contract identity layers consume."""

from collections.abc import AsyncIterable
from typing import Protocol, TypeVar

from docidentity.domain.entities import IdentityRole

TRole = TypeVar("TRole", bound=IdentityRole)


class RoleStore(Protocol[TRole]):
    """Port for role persistence."""

    async def create(self, role: TRole) -> None: ...

    async def delete(self, role: TRole) -> None: ...

    async def find_by_id(self, role_id: str) -> TRole | None: ...

    async def find_by_name(self, role_name: str) -> TRole | None: ...

    async def update(self, role: TRole) -> None: ...

    @property
    def roles(self) -> AsyncIterable[TRole]: ...

    async def dispose(self) -> None: ...
