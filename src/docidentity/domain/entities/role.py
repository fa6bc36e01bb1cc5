"""Role entity persisted as one document per role."""

from dataclasses import dataclass, field

from docidentity.domain.entities.user_role import IdentityUserRole


def store_owned(document_key: str) -> object:
    """Field set by the backing store on write, read-only to callers."""
    return field(
        default=None,
        compare=False,
        metadata={"document_key": document_key, "store_owned": True},
    )


@dataclass
class IdentityRole:
    """Role - named permission group with its user links.

    ``id`` is the canonical key of ``name`` once the role has been created.
    Subclasses may add dataclass fields; they are stored under their
    camelCase name.
    """

    name: str = ""
    id: str | None = None
    users: list[IdentityUserRole] = field(default_factory=list)
    self_link: str | None = store_owned("_self")
    etag: str | None = store_owned("_etag")
    resource_id: str | None = store_owned("_rid")
    timestamp: int | None = store_owned("_ts")

    def clear_store_fields(self) -> None:
        """Forget store-owned values, e.g. before the role is recreated."""
        self.self_link = None
        self.etag = None
        self.resource_id = None
        self.timestamp = None
