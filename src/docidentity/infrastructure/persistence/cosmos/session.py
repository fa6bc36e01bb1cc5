"""Session token shared by every call made through one context."""

import threading


class SessionToken:
    """Holds the Cosmos session token for read-your-writes consistency.

    The value only moves from empty to set; concurrent first writers race
    on a lock and exactly one wins.
    """

    def __init__(self, value: str | None = None) -> None:
        self._value = value or None
        self._lock = threading.Lock()

    @property
    def value(self) -> str | None:
        return self._value

    def set_if_empty(self, token: str | None) -> bool:
        """Store ``token`` unless a token is already held. Returns True if stored."""
        if not token:
            return False
        with self._lock:
            if self._value:
                return False
            self._value = token
            return True
