"""Asset responder — turns a request into a response.

Resolution order, each step short-circuiting:

1. Parse the path, apply the editor alias and index defaults.
2. Decode and normalize once. A rejected path is a ``404`` on the spot and
   is never offered to any source.
3. Ask each source in order; the first hit is a ``200``.
4. SPA fallback: clients that accept HTML get the index document.
5. Otherwise ``404 Not Found``.

The responder holds only immutable state (config and a tuple of sources),
so one instance serves every request from any thread.
"""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from wren.assets.content_types import content_type_for_path
from wren.assets.paths import decode_relative_path
from wren.assets.roots import discover_static_root
from wren.assets.sources import Asset, AssetSource, BundleSource, DirectorySource
from wren.config import ResolverConfig
from wren.http.request import Request
from wren.http.response import PLAIN_TEXT, Response

logger = logging.getLogger("wren.responder")


class AssetResponder:
    """Serve assets from an ordered chain of sources.

    Register an instance directly as the host's protocol handler::

        responder = AssetResponder.discover(bundle=BundleSource.from_zip("app.zip"))
        response = responder(Request.build("wren://localhost/", {"Accept": "text/html"}))

    ``serve()`` raises ``AssetReadError`` when an asset exists but cannot
    be read; every other outcome is a response.
    """

    __slots__ = ("config", "sources")

    def __init__(
        self,
        sources: Iterable[AssetSource],
        config: ResolverConfig | None = None,
    ) -> None:
        self.config = config or ResolverConfig()
        self.sources: tuple[AssetSource, ...] = tuple(sources)

    def __repr__(self) -> str:
        return f"AssetResponder(sources={self.sources!r})"

    @classmethod
    def from_roots(
        cls,
        static_root: str | Path | None = None,
        bundle: BundleSource | None = None,
        config: ResolverConfig | None = None,
    ) -> "AssetResponder":
        """Build the standard chain: static root first, then bundle."""
        config = config or ResolverConfig()
        sources: list[AssetSource] = []
        if static_root is not None:
            sources.append(DirectorySource(static_root, index=config.index_file))
        if bundle is not None:
            sources.append(bundle)
        if not sources:
            logger.warning("No asset sources configured; every request will be a 404")
        return cls(sources, config)

    @classmethod
    def discover(
        cls,
        resources: Path | None = None,
        bundle: BundleSource | None = None,
        config: ResolverConfig | None = None,
    ) -> "AssetResponder":
        """Discover the static root, then build the standard chain."""
        config = config or ResolverConfig()
        static_root = discover_static_root(resources, build_dir=config.build_dir)
        return cls.from_roots(static_root, bundle, config)

    # -- Request handling --

    def __call__(self, request: Request) -> Response:
        return self.serve(request)

    def serve(self, request: Request) -> Response:
        """Resolve *request* against the source chain."""
        path = self._route_path(request.path)

        relative = decode_relative_path(path)
        if relative is None:
            logger.debug("Rejected unsafe path %r", path)
            return self.not_found()

        asset = self._lookup(relative)
        if asset is not None:
            return self.asset_response(asset)

        if self.config.spa_fallback and request.wants_html:
            asset = self._lookup(PurePosixPath(self.config.index_file))
            if asset is not None:
                logger.debug("SPA fallback for %r", path)
                return self.asset_response(asset)

        return self.not_found()

    def _route_path(self, path: str) -> str:
        index = self.config.index_file
        if path == self.config.editor_alias:
            path = "/"
        if path.endswith("/"):
            path += index
        return path or f"/{index}"

    def _lookup(self, relative: PurePosixPath) -> Asset | None:
        for source in self.sources:
            asset = source.try_get(relative)
            if asset is not None:
                return asset
        return None

    # -- Response builders --

    def asset_response(self, asset: Asset) -> Response:
        """``200`` response for *asset* with the matching content type."""
        return Response(
            body=asset.body,
            content_type=content_type_for_path(asset.path),
            headers=self.config.common_headers,
        )

    def text_response(self, status: int, body: str) -> Response:
        """Plain-text response carrying the common headers."""
        return Response(
            body=body.encode("utf-8"),
            status=status,
            content_type=PLAIN_TEXT,
            headers=self.config.common_headers,
        )

    def not_found(self) -> Response:
        return self.text_response(404, "Not Found")
