"""Cosmos DB role store."""

from typing import Any, Generic

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from docidentity.application.ports import TRole
from docidentity.domain.entities import IdentityRole
from docidentity.domain.exceptions import InvalidArgument, NotFound, ObjectDisposed
from docidentity.domain.value_objects import derive_role_key
from docidentity.infrastructure.persistence.cosmos.context import CosmosIdentityContext
from docidentity.infrastructure.persistence.cosmos.role_document import (
    populate_role,
    role_to_document,
)
from docidentity.infrastructure.persistence.cosmos.role_query import RoleQuery
from docidentity.logging import get_logger

logger = get_logger(__name__)


class CosmosRoleStore(Generic[TRole]):
    """Role store keeping one document per role in a Cosmos container.

    Document ids are derived from role names, so a rename is carried out as
    delete-then-create. The two calls are not transactional: if the create
    fails the old document is already gone.

    Backing-store errors other than "not found" on delete propagate
    unchanged. Nothing is retried.
    """

    def __init__(
        self,
        context: CosmosIdentityContext,
        role_type: type[TRole] = IdentityRole,
    ) -> None:
        if context is None:
            raise InvalidArgument("context is required")
        self._context = context
        self._role_type = role_type
        self._disposed = False

    @property
    def context(self) -> CosmosIdentityContext:
        return self._context

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def create(self, role: TRole) -> None:
        """Create the role document; the role picks up the store-owned fields."""
        self._throw_if_disposed()
        if role is None:
            raise InvalidArgument("role is required")
        if not role.id:
            role.id = derive_role_key(role.name)
        await self._create_document(role)

    async def delete(self, role: TRole) -> None:
        """Delete the role document. No existence check is made first."""
        self._throw_if_disposed()
        if role is None:
            raise InvalidArgument("role is required")
        await self._delete_document(role)

    async def find_by_id(self, role_id: Any) -> TRole | None:
        """Get role by id."""
        self._throw_if_disposed()
        if role_id is None:
            raise InvalidArgument("role_id is required")
        return await self._query().where("id", str(role_id)).page_size(1).first()

    async def find_by_name(self, role_name: str) -> TRole | None:
        """Get role by name."""
        self._throw_if_disposed()
        return await self.find_by_id(derive_role_key(role_name))

    async def update(self, role: TRole) -> None:
        """Persist a rename. Other field changes are not written."""
        self._throw_if_disposed()
        if role is None:
            raise InvalidArgument("role is required")

        new_key = derive_role_key(role.name)
        if new_key == role.id:
            return

        old_key = role.id
        await self._delete_document(role)
        role.id = new_key
        role.clear_store_fields()
        try:
            await self._create_document(role)
        except Exception:
            logger.error(
                "role_rename_incomplete",
                old_role_id=old_key,
                new_role_id=new_key,
                role_name=role.name,
            )
            raise
        logger.debug("role_renamed", old_role_id=old_key, new_role_id=new_key)

    @property
    def roles(self) -> RoleQuery[TRole]:
        """All roles in the container, queried afresh on each iteration."""
        self._throw_if_disposed()
        return self._query()

    async def dispose(self) -> None:
        """Release the context. Later calls raise ObjectDisposed."""
        if self._disposed:
            return
        self._disposed = True
        await self._context.close()

    async def __aenter__(self) -> "CosmosRoleStore[TRole]":
        self._throw_if_disposed()
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.dispose()

    def _query(self) -> RoleQuery[TRole]:
        return RoleQuery(self._context, self._role_type)

    async def _create_document(self, role: TRole) -> None:
        document = await self._context.role_container.create_item(
            body=role_to_document(role, include_store_fields=False),
            response_hook=self._context.capture_session_token,
            **self._context.request_options(),
        )
        populate_role(role, document)
        logger.debug("role_created", role_id=role.id, role_name=role.name)

    async def _delete_document(self, role: TRole) -> None:
        if not role.id:
            raise InvalidArgument("role has no key")
        try:
            await self._context.role_container.delete_item(
                item=role.id,
                partition_key=role.id,
                response_hook=self._context.capture_session_token,
                **self._context.request_options(),
            )
        except CosmosResourceNotFoundError as e:
            raise NotFound(f"Role document {role.id} not found") from e
        logger.debug("role_deleted", role_id=role.id)

    def _throw_if_disposed(self) -> None:
        if self._disposed:
            raise ObjectDisposed(type(self).__name__)
