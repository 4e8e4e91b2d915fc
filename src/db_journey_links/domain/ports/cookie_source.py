"""Cookie forwarding port."""

from typing import Protocol


class CookieSource(Protocol):
    """Produces the ``Set-Cookie`` values of a response that may be forwarded."""

    def forwardable_cookies(self) -> list[str]:
        """Return zero or more raw ``Set-Cookie`` values."""
        ...
