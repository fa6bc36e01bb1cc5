"""Domain exceptions."""


class IdentityStoreError(Exception):
    """Base exception for docidentity."""

    pass


class InvalidArgument(IdentityStoreError, ValueError):
    """A required argument was None or empty."""

    pass


class ObjectDisposed(IdentityStoreError):
    """Operation attempted on a store that has been disposed."""

    def __init__(self, object_name: str) -> None:
        super().__init__(f"Cannot access a disposed object: {object_name}")
        self.object_name = object_name


class NotFound(IdentityStoreError):
    """Requested document was not found."""

    pass
