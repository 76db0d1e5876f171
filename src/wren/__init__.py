"""Wren — a sandboxed static-asset resolver for desktop app shells.

Answers requests for an application-internal URL scheme by mapping the
path to bytes on disk or in an in-memory bundle, with path-traversal
protection and single-page-app fallback routing.

Basic usage::

    from wren import AssetResponder, Request

    responder = AssetResponder.from_roots("./build")
    response = responder(Request.build("wren://localhost/", {"Accept": "text/html"}))

Loopback HTTP (``pip install wren-assets[server]``)::

    wren serve --root ./build
"""

__version__ = "0.1.0"
__all__ = [
    "Asset",
    "AssetApp",
    "AssetReadError",
    "AssetResponder",
    "AssetSource",
    "BundleSource",
    "ConfigurationError",
    "DirectorySource",
    "Headers",
    "Request",
    "ResolverConfig",
    "Response",
    "StaticRootNotFound",
    "WrenError",
    "content_type_for",
    "normalize_relative_path",
    "request_path",
    "safe_resolve_file_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "AssetResponder":
        from wren.responder import AssetResponder

        return AssetResponder

    if name == "AssetApp":
        from wren.server.app import AssetApp

        return AssetApp

    if name == "ResolverConfig":
        from wren.config import ResolverConfig

        return ResolverConfig

    if name in ("Asset", "AssetSource", "BundleSource", "DirectorySource"):
        from wren.assets import sources as _sources

        return getattr(_sources, name)

    if name in ("normalize_relative_path", "safe_resolve_file_path"):
        from wren.assets import paths as _paths

        return getattr(_paths, name)

    if name == "content_type_for":
        from wren.assets.content_types import content_type_for

        return content_type_for

    if name == "Headers":
        from wren.http.headers import Headers

        return Headers

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name == "request_path":
        from wren.http.url import request_path

        return request_path

    if name in (
        "AssetReadError",
        "ConfigurationError",
        "StaticRootNotFound",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
