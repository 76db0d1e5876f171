"""``wren resolve`` — show where a URL path lands inside a static root."""

import argparse
import sys
from pathlib import Path

from wren.assets.content_types import content_type_for_path
from wren.assets.paths import safe_resolve_file_path


def run_resolve(args: argparse.Namespace) -> None:
    """Print the resolved file path and content type, or exit 1 on rejection."""
    root = Path(args.root).absolute()
    resolved = safe_resolve_file_path(root, args.path)
    if resolved is None:
        print(f"rejected: {args.path!r} escapes {root} or is not valid UTF-8", file=sys.stderr)
        raise SystemExit(1)

    status = "exists" if resolved.exists() else "missing"
    print(f"{resolved}\t{content_type_for_path(resolved)}\t{status}")
