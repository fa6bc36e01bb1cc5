"""Application entry point and composition root."""

import argparse
import asyncio
import sys

from docidentity import __version__
from docidentity.application.ports import RoleStore
from docidentity.config import Settings, get_settings
from docidentity.domain.entities import IdentityRole
from docidentity.infrastructure.persistence.cosmos import (
    CosmosIdentityContext,
    CosmosRoleStore,
)
from docidentity.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_role_store(settings: Settings | None = None) -> RoleStore[IdentityRole]:
    """Composition root - role store over a fresh Cosmos context."""
    settings = settings or get_settings()
    return CosmosRoleStore(CosmosIdentityContext.from_settings(settings))


async def provision(settings: Settings) -> None:
    """Create the database and role container if missing."""
    context = CosmosIdentityContext.from_settings(settings)
    try:
        await context.initialize()
    finally:
        await context.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="docidentity", description="Cosmos DB role store")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("version", help="Print the package version")
    sub.add_parser("provision", help="Create the database and role container")
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"docidentity v{__version__}")
        return 0

    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "provisioning",
        endpoint=settings.cosmos_endpoint,
        database=settings.cosmos_database,
        container=settings.cosmos_role_container,
    )
    asyncio.run(provision(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
