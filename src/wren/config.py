"""Resolver configuration.

ResolverConfig is a frozen dataclass — built once at startup, shared by
reference with every request, never mutated.
"""

import re
from dataclasses import dataclass

from wren.errors import ConfigurationError

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(scheme="squoosh", spa_fallback=False)
    """

    # Protocol
    scheme: str = "wren"
    dev_server_url: str = "http://localhost:5000"

    # Routing
    index_file: str = "index.html"
    editor_alias: str = "/editor"
    spa_fallback: bool = True

    # Static root discovery
    build_dir: str = "build"

    # Headers sent on every response
    cache_control: str = "no-cache"
    embedder_policy: str = "require-corp"
    opener_policy: str = "same-origin"

    # Loopback server (``wren serve``); port 0 lets the OS pick
    host: str = "127.0.0.1"
    port: int = 0

    def __post_init__(self) -> None:
        if not _SCHEME_RE.match(self.scheme):
            msg = f"scheme must be a valid URL scheme, got: {self.scheme!r}"
            raise ConfigurationError(msg)

        if not self.index_file or "/" in self.index_file or "\\" in self.index_file:
            msg = f"index_file must be a bare file name, got: {self.index_file!r}"
            raise ConfigurationError(msg)

        if not self.editor_alias.startswith("/"):
            msg = f"editor_alias must start with '/', got: {self.editor_alias!r}"
            raise ConfigurationError(msg)

        if not self.build_dir:
            raise ConfigurationError("build_dir cannot be empty")

        if not self.host.strip():
            raise ConfigurationError("host cannot be empty")

        if not 0 <= self.port <= 65535:
            msg = f"port must be in [0, 65535], got: {self.port}"
            raise ConfigurationError(msg)

    @property
    def common_headers(self) -> tuple[tuple[str, str], ...]:
        """Headers attached to every response, success or failure."""
        return (
            ("Cache-Control", self.cache_control),
            ("Cross-Origin-Embedder-Policy", self.embedder_policy),
            ("Cross-Origin-Opener-Policy", self.opener_policy),
        )

    @property
    def root_url(self) -> str:
        """The custom scheme's root URL, e.g. ``wren://localhost/``."""
        return f"{self.scheme}://localhost/"

    def launch_url(self, debug: bool) -> str:
        """URL the host window should open.

        Debug builds point at the development server; release builds point
        at the custom scheme served by the responder.
        """
        return self.dev_server_url if debug else self.root_url
