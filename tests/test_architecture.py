"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on application or adapters
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_has_no_outward_dependencies() -> None:
    """Domain models, errors and ports should only import the domain itself."""
    (
        archrule("domain", comment="Domain should be independent")
        .match("db_journey_links.domain*")
        .should_not_import("db_journey_links.adapters*")
        .should_not_import("db_journey_links.application*")
        .may_import("db_journey_links.domain*")
        .check("db_journey_links")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("db_journey_links.application*")
        .should_not_import("db_journey_links.adapters*")
        .should_not_import("aiohttp*")
        .should_not_import("starlette*")
        .may_import("db_journey_links.domain*")
        .may_import("db_journey_links.application*")
        .check("db_journey_links")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services; wiring happens in bootstrap."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("db_journey_links.adapters*")
        .should_not_import("db_journey_links.application*")
        .should_not_import("db_journey_links.bootstrap")
        .may_import("db_journey_links.domain*")
        .may_import("db_journey_links.adapters*")
        .check("db_journey_links", only_direct_imports=True)
    )
