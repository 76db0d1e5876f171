"""Request URL parsing.

Hosts hand the protocol handler a raw URI that may be fully qualified
(``wren://localhost/app.js?v=2``) or already a path (``/app.js``).
"""


def request_path(uri: str) -> str:
    """Return the pathname of *uri*, without query or fragment.

    For a fully qualified URI the path starts at the first ``/`` after the
    ``scheme://`` marker; a URI with no such slash has path ``/``. An empty
    result also becomes ``/``.
    """
    scheme, sep, rest = uri.partition("://")
    if sep:
        slash = rest.find("/")
        path = rest[slash:] if slash != -1 else "/"
    else:
        path = scheme

    path = path.split("?", 1)[0]
    path = path.split("#", 1)[0]
    return path or "/"
