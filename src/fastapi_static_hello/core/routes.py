"""Route table for the JSON endpoints.

Dispatch is an ordered tuple of RouteEntry objects. The application
factory registers them in order, ahead of the static file fallback.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from fastapi_static_hello.exceptions import DuplicateRouteError, RouteTableError

# HTTP methods a route table entry may declare
ALLOWED_METHODS: frozenset[str] = frozenset(
    {
        "GET",
        "HEAD",
        "POST",
        "PUT",
        "PATCH",
        "DELETE",
        "OPTIONS",
    }
)


@dataclass(frozen=True)
class RouteEntry:
    """One (method, path, handler) row of the route table.

    Attributes:
        method: Upper-case HTTP method.
        path: URL path, starting with '/'.
        endpoint: Handler called with no arguments.
        summary: Optional OpenAPI summary.
        tags: OpenAPI tags.
    """

    method: str
    path: str
    endpoint: Callable[..., Any]
    summary: str | None = None
    tags: tuple[str, ...] = ()


def hello() -> dict[str, str]:
    """Return the fixed greeting."""
    return {"message": "Hello World"}


def health() -> dict[str, str]:
    """Report that the process is up and routing requests.

    No dependency checks are made; the answer is constant once the
    listener is accepting connections.
    """
    return {"status": "healthy"}


ROUTE_TABLE: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/api/hello", hello, summary="Greeting", tags=("api",)),
    RouteEntry("GET", "/health", health, summary="Health check", tags=("health",)),
)


def validate_route_table(entries: Iterable[RouteEntry]) -> list[RouteEntry]:
    """Check a route table before registration.

    Args:
        entries: Route entries in dispatch order.

    Returns:
        The entries as a list, order preserved.

    Raises:
        RouteTableError: If a method is unknown or a path lacks a leading '/'.
        DuplicateRouteError: If two entries share the same method and path.
    """
    seen: set[tuple[str, str]] = set()
    validated: list[RouteEntry] = []

    for entry in entries:
        if entry.method not in ALLOWED_METHODS:
            raise RouteTableError(
                f"Unsupported HTTP method {entry.method!r} for route {entry.path}"
            )
        if not entry.path.startswith("/"):
            raise RouteTableError(f"Route path must start with '/': {entry.path!r}")

        key = (entry.method, entry.path)
        if key in seen:
            raise DuplicateRouteError(f"Duplicate route: {entry.method} {entry.path}")
        seen.add(key)
        validated.append(entry)

    return validated
