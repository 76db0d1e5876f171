"""Extension to content-type mapping for served assets.

A fixed table, independent of the platform ``mimetypes`` registry.
Text and JSON types carry ``charset=utf-8``.
"""

from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    "html": "text/html; charset=utf-8",
    "js": "application/javascript; charset=utf-8",
    "css": "text/css; charset=utf-8",
    "json": "application/json; charset=utf-8",
    "wasm": "application/wasm",
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "avif": "image/avif",
    "ico": "image/x-icon",
    "woff2": "font/woff2",
    "map": "application/json; charset=utf-8",
    "txt": "text/plain; charset=utf-8",
}


def content_type_for(extension: str | None) -> str:
    """Return the Content-Type header value for *extension*.

    Case-insensitive; a leading dot is accepted (``".JS"`` works).
    Unknown or missing extensions map to ``application/octet-stream``.
    """
    if not extension:
        return DEFAULT_CONTENT_TYPE
    return CONTENT_TYPES.get(extension.lstrip(".").lower(), DEFAULT_CONTENT_TYPE)


def mimetype_for(extension: str | None) -> str:
    """Return the bare MIME type for *extension*, without ``charset``."""
    return content_type_for(extension).split(";", 1)[0]


def content_type_for_path(path: str | PurePath) -> str:
    """Return the Content-Type header value for a file name or path."""
    return content_type_for(PurePath(path).suffix)
