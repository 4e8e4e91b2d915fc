"""Adapters for the DB (bahn.de) booking service."""

from db_journey_links.adapters.bahn_api.cookies import (
    MultiValueCookieSource,
    SingleValueCookieSource,
    build_cookie_header,
    cookie_source_for,
)
from db_journey_links.adapters.bahn_api.http_client import BahnHttpClient

__all__ = [
    "BahnHttpClient",
    "MultiValueCookieSource",
    "SingleValueCookieSource",
    "build_cookie_header",
    "cookie_source_for",
]
