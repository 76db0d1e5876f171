"""Lexical path sandboxing.

Turns an untrusted URL path into a relative path that cannot leave the
static root. Containment is proven from components alone: decoding and
normalization happen before any join, and no filesystem call is made.
"""

import re
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

# "C:", "c:foo" — a drive prefix on Windows, rejected on every platform
_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def normalize_relative_path(path: str) -> PurePosixPath | None:
    """Normalize an already-decoded path into a safe relative path.

    Both ``/`` and ``\\`` separate components. ``.`` and empty components
    are dropped; ``..`` pops the previous component. Returns ``None`` when
    the path is absolute, carries a drive prefix or NUL byte, or climbs
    above its starting point. The empty string yields ``PurePosixPath()``.
    """
    unified = path.replace("\\", "/")
    if unified.startswith("/"):
        return None

    parts: list[str] = []
    for component in unified.split("/"):
        if component in ("", "."):
            continue
        if component == "..":
            if not parts:
                return None
            parts.pop()
            continue
        if _DRIVE_RE.match(component) or "\x00" in component:
            return None
        parts.append(component)

    return PurePosixPath(*parts)


def decode_relative_path(url_path: str) -> PurePosixPath | None:
    """Strip one leading slash, percent-decode as UTF-8, then normalize.

    Invalid UTF-8 after decoding is a rejection. Encoded traversal
    (``%2e%2e``, ``%2f``, ``%5c``) is decoded first so the normalizer
    sees it.
    """
    trimmed = url_path[1:] if url_path.startswith("/") else url_path
    try:
        decoded = unquote(trimmed, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return None
    return normalize_relative_path(decoded)


def safe_resolve_file_path(root: Path, url_path: str) -> Path | None:
    """Resolve *url_path* to a file path lexically inside *root*.

    Returns ``None`` for traversal attempts and undecodable paths.
    """
    relative = decode_relative_path(url_path)
    if relative is None:
        return None
    return root.joinpath(*relative.parts)
