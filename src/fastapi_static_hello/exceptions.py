"""Exception hierarchy for the static hello server."""


class StaticHelloError(Exception):
    """Base exception for all errors raised by fastapi-static-hello.

    Catching this exception will catch every configuration, routing,
    static-path and startup error the package raises.

    Example:
        try:
            serve(load_config())
        except StaticHelloError as e:
            logger.error(f"Server failed: {e}")
    """


class ConfigurationError(StaticHelloError):
    """Raised when the process environment holds an unusable setting.

    Example:
        ConfigurationError("PORT must be an integer between 0 and 65535, got 'abc'")
    """


class RouteTableError(StaticHelloError):
    """Raised when a route table entry is malformed.

    Examples of malformed entries:
        - Unknown HTTP method: FETCH /api/hello
        - Path without a leading slash: GET health

    Example:
        RouteTableError("Route path must start with '/': 'health'")
    """


class DuplicateRouteError(RouteTableError):
    """Raised when two route table entries share the same method and path.

    Example:
        DuplicateRouteError("Duplicate route: GET /health")
    """


class StaticPathError(StaticHelloError):
    """Raised when a request path escapes the static root.

    This covers '..' segments, NUL bytes, and symlinks whose target
    resolves outside the static root. The HTTP layer answers these
    with a plain 404.

    Example:
        StaticPathError("Path traversal detected in request path: '../etc/passwd'")
    """


class ServerStartupError(StaticHelloError):
    """Raised when the listener cannot be bound.

    Example:
        ServerStartupError("Cannot listen on 0.0.0.0:3000: [Errno 98] Address already in use")
    """
