"""Wren exception hierarchy.

Shared across the responder, asset sources, root discovery, and the ASGI
adapter so every module raises and catches the same types.

Path rejections and missing assets are not exceptions: the responder turns
them into ``404`` responses. Only genuine I/O failures escape ``serve()``.
"""

from pathlib import Path


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when resolver configuration is invalid.

    Also raised when an optional dependency (e.g. ``uvicorn`` for
    ``wren serve``) is needed but not installed.
    """


class StaticRootNotFound(ConfigurationError):  # noqa: N818 — mirrors FileNotFoundError
    """No candidate directory contains a static asset tree.

    Raised by ``find_static_root()``. ``discover_static_root()`` catches it
    and degrades to a responder without an on-disk source.
    """

    def __init__(self, candidates: tuple[Path, ...], build_dir: str) -> None:
        self.candidates = candidates
        self.build_dir = build_dir
        searched = ", ".join(str(c) for c in candidates) or "<none>"
        super().__init__(f"No {build_dir!r} directory found in: {searched}")


class AssetReadError(WrenError):
    """An asset exists but could not be read.

    The single failure that escapes ``AssetResponder.serve()``. Hosts treat
    it as a broken request, not a crashed process. Chained from the
    underlying ``OSError``.
    """

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to read asset {self.path}{detail}")
