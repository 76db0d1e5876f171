"""Immutable inbound request.

The protocol handler only needs two things from the host: the full URI and
a header accessor. Everything else the host knows about a request is
irrelevant to asset resolution.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from urllib.parse import quote

from wren._internal.asgi import HTTPScope, Scope
from wren.http.headers import Headers
from wren.http.url import request_path


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable request for an asset.

    ``uri`` may be fully qualified (``wren://localhost/app.js``) or a bare
    path. ``path`` is derived from it on access.
    """

    uri: str
    headers: Headers = field(default_factory=Headers)
    method: str = "GET"

    @classmethod
    def build(
        cls,
        uri: str,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        method: str = "GET",
    ) -> "Request":
        """Build a request from plain string headers."""
        return cls(uri=uri, headers=Headers.from_pairs(headers or {}), method=method.upper())

    @classmethod
    def from_asgi(cls, scope: Scope, scheme: str = "http") -> "Request":
        """Build a request from an ASGI HTTP scope.

        Uses ``raw_path`` when the server provides it, so percent-decoding
        happens exactly once, inside the path resolver. Raw non-ASCII bytes
        are percent-encoded as they arrive; the resolver decodes them as UTF-8.
        """
        http = HTTPScope.from_scope(scope)
        headers = Headers(http.headers)

        if http.raw_path:
            path = quote(http.raw_path, safe="/%")
        else:
            path = quote(http.path, safe="/")

        host = headers.get("host")
        if host is None and http.server is not None:
            host = f"{http.server[0]}:{http.server[1]}"

        uri = f"{scheme}://{host or 'localhost'}{path}"
        if http.query_string:
            uri = f"{uri}?{http.query_string.decode('latin-1')}"
        return cls(uri=uri, headers=headers, method=http.method)

    # -- Computed properties --

    @property
    def path(self) -> str:
        """Pathname of ``uri`` (query and fragment stripped, never empty)."""
        return request_path(self.uri)

    @property
    def accept(self) -> str:
        """The Accept header, lower-cased (empty when absent)."""
        return (self.headers.get("accept") or "").lower()

    @property
    def wants_html(self) -> bool:
        """True if the client would take an HTML document.

        Matches ``text/html`` or a ``*/*`` wildcard anywhere in Accept. A
        data fetch that accepts ``*/*`` qualifies too.
        """
        accept = self.accept
        return "text/html" in accept or "*/*" in accept
