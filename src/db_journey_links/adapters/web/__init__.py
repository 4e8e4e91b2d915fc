"""Starlette web adapter exposing the parse-url endpoint."""

from db_journey_links.adapters.web.app import create_app

__all__ = ["create_app"]
