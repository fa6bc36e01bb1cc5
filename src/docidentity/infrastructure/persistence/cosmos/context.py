"""Cosmos DB connection context for identity stores."""

from collections.abc import Mapping
from typing import Any

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient

from docidentity.application.ports import RoleContainer
from docidentity.config import Settings
from docidentity.infrastructure.persistence.cosmos.session import SessionToken
from docidentity.logging import get_logger

ROLE_PARTITION_KEY_PATH = "/id"
SESSION_TOKEN_HEADER = "x-ms-session-token"

logger = get_logger(__name__)


class CosmosIdentityContext:
    """Owns the Cosmos client, the role container and the session token.

    The context is closed once; closing again does nothing.
    """

    def __init__(
        self,
        client: CosmosClient,
        database_name: str,
        role_container_name: str,
        session: SessionToken | None = None,
    ) -> None:
        self._client = client
        self._database_name = database_name
        self._role_container_name = role_container_name
        self._role_container: RoleContainer = client.get_database_client(
            database_name
        ).get_container_client(role_container_name)
        self._session = session or SessionToken()
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "CosmosIdentityContext":
        """Build a context with a new client from application settings."""
        client = CosmosClient(
            settings.cosmos_endpoint,
            credential=settings.cosmos_key,
            consistency_level=settings.cosmos_consistency_level,
        )
        return cls(
            client,
            database_name=settings.cosmos_database,
            role_container_name=settings.cosmos_role_container,
        )

    @property
    def role_container(self) -> RoleContainer:
        return self._role_container

    @property
    def session_token(self) -> str | None:
        return self._session.value

    @property
    def closed(self) -> bool:
        return self._closed

    def set_session_token_if_empty(self, token: str | None) -> bool:
        return self._session.set_if_empty(token)

    def capture_session_token(self, headers: Mapping[str, str], *_: Any) -> None:
        """Response hook: remember the first session token the service hands out."""
        self.set_session_token_if_empty(headers.get(SESSION_TOKEN_HEADER))

    def request_options(self) -> dict[str, Any]:
        """Keyword options threaded into every container call."""
        token = self._session.value
        return {"session_token": token} if token else {}

    async def initialize(self) -> None:
        """Create the database and role container if they do not exist."""
        database = await self._client.create_database_if_not_exists(id=self._database_name)
        self._role_container = await database.create_container_if_not_exists(
            id=self._role_container_name,
            partition_key=PartitionKey(path=ROLE_PARTITION_KEY_PATH),
        )
        logger.info(
            "role_container_ready",
            database=self._database_name,
            container=self._role_container_name,
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._client.close()
