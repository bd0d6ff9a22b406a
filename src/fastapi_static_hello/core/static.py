"""Static file resolution.

Maps a request path onto a file under the static root. Resolution follows
symlinks and then verifies the target is still inside the root, so a link
pointing elsewhere on disk is treated the same as a '..' escape.
"""

from pathlib import Path, PurePosixPath

from fastapi_static_hello.exceptions import StaticPathError

INDEX_FILE = "index.html"


def resolve_static_file(root: Path | str, request_path: str) -> Path | None:
    """Resolve a request path to a servable file under the static root.

    Args:
        root: Static root directory.
        request_path: URL path, with or without a leading '/'.

    Returns:
        Absolute path of the file to serve, or None if nothing matches.
        Directories resolve to their index.html when one exists.
        Dot-file segments (e.g. '.env', '.git/config') never match.
        Paths the filesystem rejects (e.g. over-long names) never match.

    Raises:
        StaticPathError: If the path contains '..' or a NUL byte, or
            resolves outside the static root.

    Examples:
        resolve_static_file("public", "/index.html") -> /srv/public/index.html
        resolve_static_file("public", "/")           -> /srv/public/index.html
        resolve_static_file("public", "/missing.js") -> None
    """
    if "\x00" in request_path:
        raise StaticPathError(f"NUL byte in request path: {request_path!r}")

    parts = PurePosixPath(request_path.lstrip("/")).parts

    # '..' as a path component, not inside file names
    if ".." in parts:
        raise StaticPathError(f"Path traversal detected in request path: {request_path!r}")

    if any(part.startswith(".") for part in parts):
        return None

    base = Path(root).resolve()

    try:
        candidate = _contained(base.joinpath(*parts), base, request_path)

        if candidate.is_dir():
            candidate = _contained(candidate / INDEX_FILE, base, request_path)

        if not candidate.is_file():
            return None
    except OSError:
        # e.g. ENAMETOOLONG: a path the filesystem cannot even stat is not found
        return None

    return candidate


def _contained(path: Path, base: Path, request_path: str) -> Path:
    """Resolve symlinks in path and reject results outside base."""
    resolved = path.resolve()
    if not _is_path_within(resolved, base):
        raise StaticPathError(
            f"Request path resolves outside static root: {request_path!r}\n"
            f"Static root: {base}"
        )
    return resolved


def _is_path_within(path: Path, base: Path) -> bool:
    """Check if a resolved path is within a base directory.

    Args:
        path: Resolved path to check.
        base: Base directory path.

    Returns:
        True if path is within base, False otherwise.
    """
    try:
        path.relative_to(base)
        return True
    except ValueError:
        return False
