"""Role storage for identity layers backed by Azure Cosmos DB."""

__version__ = "0.1.0"
