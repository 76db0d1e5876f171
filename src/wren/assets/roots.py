"""Static root discovery.

The on-disk asset tree lives in a ``build`` directory next to the
application: inside the bundled resource directory of a frozen app
(PyInstaller's ``sys._MEIPASS``), or beside the running executable.
Discovery runs once at startup; the result never changes afterwards.
"""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from wren.errors import StaticRootNotFound

logger = logging.getLogger("wren.assets")


def resource_dir() -> Path | None:
    """The application resource directory, when running frozen."""
    meipass = getattr(sys, "_MEIPASS", None)
    return Path(meipass) if meipass else None


def executable_dir() -> Path | None:
    """Directory containing the running executable."""
    if not sys.executable:
        return None
    return Path(sys.executable).resolve().parent


def find_static_root(candidates: Iterable[Path | None], build_dir: str = "build") -> Path:
    """Return the first ``candidate / build_dir`` that is a directory.

    ``None`` candidates are skipped. Raises ``StaticRootNotFound`` when no
    candidate qualifies.
    """
    searched: list[Path] = []
    for candidate in candidates:
        if candidate is None:
            continue
        searched.append(candidate)
        root = candidate / build_dir
        if root.is_dir():
            return root.absolute()
    raise StaticRootNotFound(tuple(searched), build_dir)


def discover_static_root(
    resources: Path | None = None,
    *,
    build_dir: str = "build",
) -> Path | None:
    """Locate the static root, or ``None`` when the app ships none.

    Tries *resources* (default: the frozen app's resource directory) first,
    then the executable's directory. A missing root is logged, not raised:
    the app still runs, served only from an embedded bundle if it has one.
    """
    candidates = (resources if resources is not None else resource_dir(), executable_dir())
    try:
        root = find_static_root(candidates, build_dir)
    except StaticRootNotFound as exc:
        logger.warning("%s; serving without an on-disk static root", exc)
        return None
    logger.debug("Static root: %s", root)
    return root
