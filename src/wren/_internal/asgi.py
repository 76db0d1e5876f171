"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with typed
dataclasses for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Internal only -- users interact with Request, not this.
    """

    type: str
    method: str
    path: str
    raw_path: bytes
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    server: tuple[str, int] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        server = scope.get("server")
        return cls(
            type=scope["type"],
            method=scope.get("method", "GET"),
            path=scope.get("path", "/"),
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
            headers=tuple(tuple(pair) for pair in scope.get("headers", ())),
            server=tuple(server) if server else None,
        )
