"""Application factory.

Composes the route table and the static file fallback into a FastAPI
application. Route table entries are registered first and in order; the
static fallback comes after them, so it only sees paths nothing else
claimed. A final catch-all answers every other method with 404.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import FileResponse, JSONResponse, Response

from fastapi_static_hello.config import ServerConfig
from fastapi_static_hello.core.routes import (
    ALLOWED_METHODS,
    ROUTE_TABLE,
    RouteEntry,
    validate_route_table,
)
from fastapi_static_hello.core.static import resolve_static_file
from fastapi_static_hello.exceptions import StaticPathError

logger = logging.getLogger(__name__)

STATIC_ROUTE_PATH = "/{file_path:path}"
STATIC_METHODS = ["GET", "HEAD"]
# Methods the static fallback never serves; unmatched paths still get 404, not 405
NOT_FOUND_METHODS = sorted(ALLOWED_METHODS - set(STATIC_METHODS))


def create_app(
    config: ServerConfig,
    *,
    routes: Iterable[RouteEntry] = ROUTE_TABLE,
) -> FastAPI:
    """Create the FastAPI application for a server configuration.

    Every GET entry also answers HEAD (headers only), and every entry
    answers at its path with a trailing slash, unless the table declares
    those forms itself.

    Args:
        config: Server configuration; only static_root is used here.
        routes: Route table in dispatch order.

    Returns:
        A FastAPI app with the route table and static fallback registered.

    Raises:
        RouteTableError: If a route entry is malformed.
        DuplicateRouteError: If two entries share the same method and path.

    Example:
        from fastapi_static_hello import create_app, load_config

        app = create_app(load_config())
    """
    static_root = config.resolved_static_root

    if not static_root.is_dir():
        logger.warning(
            "Static root does not exist; every static lookup will 404",
            extra={"static_root": str(static_root)},
        )

    router = APIRouter()
    entries = validate_route_table(routes)
    taken = {(entry.method, entry.path) for entry in entries}

    for entry in entries:
        _add_route(router, entry, taken)
        logger.debug(
            "Registered route",
            extra={"method": entry.method, "path": entry.path},
        )

    router.add_api_route(
        path=STATIC_ROUTE_PATH,
        endpoint=_make_static_endpoint(static_root),
        methods=STATIC_METHODS,
        response_class=FileResponse,
        include_in_schema=False,
    )
    router.add_api_route(
        path=STATIC_ROUTE_PATH,
        endpoint=_not_found,
        methods=NOT_FOUND_METHODS,
        include_in_schema=False,
    )

    logger.info(
        "Route registration complete",
        extra={"route_count": len(entries), "static_root": str(static_root)},
    )

    app = FastAPI(title="fastapi-static-hello")
    app.include_router(router)
    return app


def _add_route(router: APIRouter, entry: RouteEntry, taken: set[tuple[str, str]]) -> None:
    """Add a route table entry to the router with its OpenAPI metadata.

    Also registers the implicit HEAD and trailing-slash forms of the entry
    unless the table or an earlier entry already claimed them.

    Args:
        router: The APIRouter to add the route to.
        entry: The route table entry.
        taken: (method, path) pairs already claimed; updated in place.
    """
    kwargs: dict[str, Any] = {
        "tags": list(entry.tags),
        # Extract docstring for OpenAPI description
        "description": entry.endpoint.__doc__,
    }

    if entry.summary is not None:
        kwargs["summary"] = entry.summary

    router.add_api_route(
        path=entry.path,
        endpoint=entry.endpoint,
        methods=[entry.method],
        **kwargs,
    )

    paths = [entry.path]
    alias = _trailing_slash_alias(entry.path)
    if alias is not None and (entry.method, alias) not in taken:
        taken.add((entry.method, alias))
        router.add_api_route(
            path=alias,
            endpoint=entry.endpoint,
            methods=[entry.method],
            include_in_schema=False,
        )
        paths.append(alias)

    if entry.method != "GET":
        return

    head = _make_head_endpoint(entry.endpoint)
    for path in paths:
        if ("HEAD", path) not in taken:
            taken.add(("HEAD", path))
            router.add_api_route(
                path=path,
                endpoint=head,
                methods=["HEAD"],
                include_in_schema=False,
            )


def _trailing_slash_alias(path: str) -> str | None:
    """Return path with a trailing '/', or None if it already has one.

    Examples:
        /api/hello  -> /api/hello/
        /health/    -> None
        /           -> None
    """
    if path.endswith("/"):
        return None
    return f"{path}/"


def _make_head_endpoint(endpoint: Callable[..., Any]) -> Callable[[], Response]:
    """Build a HEAD handler that returns the GET response's headers only."""

    def head() -> Response:
        rendered = JSONResponse(jsonable_encoder(endpoint()))
        return Response(status_code=rendered.status_code, headers=dict(rendered.headers))

    return head


def _not_found() -> Response:
    raise HTTPException(status_code=404)


def _make_static_endpoint(static_root: Path) -> Callable[[str], FileResponse]:
    """Build the fallback endpoint serving files under static_root.

    The endpoint is sync so FastAPI runs the filesystem lookups in its
    threadpool.
    """

    def serve_static(file_path: str) -> FileResponse:
        try:
            resolved = resolve_static_file(static_root, file_path)
        except StaticPathError as exc:
            logger.warning(
                "Rejected static path outside root",
                extra={"request_path": file_path, "reason": str(exc)},
            )
            raise HTTPException(status_code=404) from exc

        if resolved is None:
            raise HTTPException(status_code=404)

        return FileResponse(resolved)

    return serve_static
