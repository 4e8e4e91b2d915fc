"""Forwarding of ``Set-Cookie`` values from the booking lookup to the recon call.

aiohttp exposes response headers as a multidict, so every ``Set-Cookie``
value is available. Plain mappings only keep one (possibly coalesced)
value, which is forwarded as is. The implementation is picked by
capability, not by type.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from db_journey_links.domain.ports import CookieSource

SET_COOKIE = "Set-Cookie"


class MultiValueCookieSource:
    """Reads every ``Set-Cookie`` value from a multidict (``getall``)."""

    def __init__(self, headers: Any) -> None:
        self._headers = headers

    def forwardable_cookies(self) -> list[str]:
        return [str(value) for value in self._headers.getall(SET_COOKIE, [])]


class SingleValueCookieSource:
    """Reads the single ``Set-Cookie`` value of a plain mapping.

    A coalesced header cannot be split on commas reliably because of
    ``Expires=...`` dates, so it is forwarded whole.
    """

    def __init__(self, headers: Mapping[str, str]) -> None:
        self._headers = headers

    def forwardable_cookies(self) -> list[str]:
        value = self._headers.get(SET_COOKIE) or self._headers.get(SET_COOKIE.lower())
        return [value] if value else []


def cookie_source_for(headers: Any) -> CookieSource:
    """Pick the cookie source matching what ``headers`` can do."""
    if callable(getattr(headers, "getall", None)):
        return MultiValueCookieSource(headers)
    return SingleValueCookieSource(headers)


def build_cookie_header(set_cookie_values: Iterable[str]) -> str:
    """Turn ``Set-Cookie`` values into a ``Cookie`` request header value.

    Only the leading ``name=value`` pair of each value is kept.
    """
    pairs = []
    for value in set_cookie_values:
        pair = value.split(";", 1)[0].strip()
        if pair and "=" in pair:
            pairs.append(pair)
    return "; ".join(pairs)
