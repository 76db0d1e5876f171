"""Wren CLI — serve an asset tree over loopback HTTP, debug path resolution.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — a sandboxed static-asset resolver for desktop app shells.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren serve -------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve assets over loopback HTTP")
    serve_parser.add_argument(
        "--root",
        default=None,
        help="Static root directory (default: discover a 'build' directory)",
    )
    serve_parser.add_argument(
        "--bundle",
        default=None,
        help="Embedded bundle: a .zip archive or a directory to freeze into memory",
    )
    serve_parser.add_argument(
        "--scheme",
        default=None,
        help="Custom URL scheme registered by the host (default: wren)",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port number (0 picks a free port)",
    )
    serve_parser.add_argument(
        "--no-spa",
        action="store_true",
        help="Disable index.html fallback for unmatched HTML requests",
    )
    serve_parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Logging level",
    )

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Show where a URL path resolves inside a static root",
    )
    resolve_parser.add_argument("root", help="Static root directory")
    resolve_parser.add_argument("path", help="URL path, e.g. /assets/app.js")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from wren.cli._serve import run_server

        run_server(args)
    elif args.command == "resolve":
        from wren.cli._resolve import run_resolve

        run_resolve(args)
