"""``wren serve`` — loopback HTTP server for an asset tree.

Builds a responder from the command line (or static-root discovery) and
runs it under uvicorn.
"""

import argparse
import logging
import sys
from pathlib import Path

from wren.assets.sources import BundleSource
from wren.config import ResolverConfig
from wren.errors import ConfigurationError
from wren.responder import AssetResponder
from wren.server.app import AssetApp

logger = logging.getLogger("wren.cli")


def load_bundle(location: str) -> BundleSource:
    """Load an embedded bundle from a zip archive or a directory."""
    path = Path(location)
    if path.is_dir():
        return BundleSource.from_directory(path)
    if path.is_file():
        return BundleSource.from_zip(path)
    msg = f"Bundle not found: {path}"
    raise ConfigurationError(msg)


def build_app(args: argparse.Namespace) -> tuple[AssetApp, ResolverConfig]:
    """Build the ASGI app and effective config from parsed arguments."""
    defaults = ResolverConfig()
    config = ResolverConfig(
        scheme=args.scheme or defaults.scheme,
        spa_fallback=not args.no_spa,
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
    )

    bundle = load_bundle(args.bundle) if args.bundle else None

    if args.root:
        root = Path(args.root)
        if not root.is_dir():
            msg = f"Static root not found: {root}"
            raise ConfigurationError(msg)
        responder = AssetResponder.from_roots(root, bundle, config)
    else:
        responder = AssetResponder.discover(bundle=bundle, config=config)

    return AssetApp(responder), config


def run_server(args: argparse.Namespace) -> None:
    """Start uvicorn with an ``AssetApp`` built from *args*."""
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app, config = build_app(args)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        import uvicorn
    except ImportError as exc:
        msg = "wren serve requires uvicorn. Install with: pip install wren-assets[server]"
        raise ConfigurationError(msg) from exc

    logger.info("Starting asset server on %s:%d", config.host, config.port)
    logger.info("Custom-scheme hosts should open %s", config.launch_url(debug=False))
    uvicorn.run(app, host=config.host, port=config.port, log_level=args.log_level)
