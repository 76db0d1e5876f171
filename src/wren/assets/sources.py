"""Asset sources — byte providers queried in priority order.

A *source* answers a single question: given a sandboxed relative path, do
you have bytes for it? The responder walks an ordered tuple of sources and
serves the first hit, so new backends slot in without touching the
resolution logic.

Two sources ship with wren:

- ``DirectorySource`` — files under a static root on disk
- ``BundleSource`` — an in-memory, read-only bundle frozen at startup

Both are immutable after construction and safe to share across threads.
"""

import logging
import zipfile
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from wren.assets.paths import normalize_relative_path
from wren.errors import AssetReadError

logger = logging.getLogger("wren.assets")


@dataclass(frozen=True, slots=True)
class Asset:
    """Bytes found by a source.

    ``path`` is the relative POSIX path actually served, after any
    directory-index expansion. Its extension selects the content type.
    """

    path: str
    body: bytes


@runtime_checkable
class AssetSource(Protocol):
    """Anything that can look up an asset by sandboxed relative path."""

    def try_get(self, relative: PurePosixPath) -> Asset | None: ...


class DirectorySource:
    """Serve files from a static root directory.

    ``relative`` must come from the path normalizer; joining it onto the
    root cannot escape lexically. With ``contain_symlinks`` (the default),
    a symlink whose target lies outside the resolved root is a miss.
    """

    __slots__ = ("_contain_symlinks", "_index", "_resolved_root", "root")

    def __init__(
        self,
        root: str | Path,
        *,
        index: str = "index.html",
        contain_symlinks: bool = True,
    ) -> None:
        self.root = Path(root).absolute()
        self._index = index
        self._contain_symlinks = contain_symlinks
        self._resolved_root = self.root.resolve() if contain_symlinks else self.root

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.root)!r})"

    def try_get(self, relative: PurePosixPath) -> Asset | None:
        file_path = self.root.joinpath(*relative.parts)
        served = relative

        # A path the OS refuses to stat (ENAMETOOLONG, ELOOP) is a miss, not a read failure.
        try:
            if file_path.is_dir():
                file_path = file_path / self._index
                served = relative / self._index

            if not file_path.is_file():
                return None
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", file_path, exc)
            return None

        if self._contain_symlinks and not file_path.resolve().is_relative_to(self._resolved_root):
            logger.warning("Refusing %s: symlink target is outside %s", file_path, self.root)
            return None

        try:
            body = file_path.read_bytes()
        except OSError as exc:
            raise AssetReadError(file_path, exc.strerror or str(exc)) from exc
        return Asset(path=served.as_posix(), body=body)


class BundleSource:
    """Serve assets from an immutable in-memory bundle.

    Keys are relative POSIX paths (``"assets/app.js"``). The mapping is
    copied and frozen on construction. Use the ``from_*`` constructors to
    load a bundle at startup::

        bundle = BundleSource.from_zip("assets.zip")
        bundle = BundleSource.from_package("myapp", "build")
    """

    __slots__ = ("_files", "_index")

    def __init__(self, files: Mapping[str, bytes], *, index: str = "index.html") -> None:
        self._files: Mapping[str, bytes] = MappingProxyType(dict(files))
        self._index = index

    def __repr__(self) -> str:
        return f"BundleSource(<{len(self._files)} files>)"

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, key: object) -> bool:
        return key in self._files

    @property
    def files(self) -> Mapping[str, bytes]:
        """Read-only view of the bundle contents."""
        return self._files

    def try_get(self, relative: PurePosixPath) -> Asset | None:
        key = relative.as_posix()
        if key in ("", "."):
            key = self._index
        body = self._files.get(key)
        if body is None:
            return None
        return Asset(path=key, body=body)

    # -- Loaders --

    @classmethod
    def from_directory(cls, directory: str | Path, *, index: str = "index.html") -> "BundleSource":
        """Freeze every file under *directory* into a bundle."""
        root = Path(directory)
        if not root.is_dir():
            msg = f"Bundle directory not found: {root}"
            raise FileNotFoundError(msg)
        files = {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }
        logger.debug("Loaded %d bundled assets from %s", len(files), root)
        return cls(files, index=index)

    @classmethod
    def from_zip(cls, archive: str | Path, *, index: str = "index.html") -> "BundleSource":
        """Freeze the members of a zip archive into a bundle.

        Member names the path normalizer rejects are skipped and logged.
        """
        files: dict[str, bytes] = {}
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                relative = normalize_relative_path(info.filename)
                if relative is None or not relative.parts:
                    logger.warning("Skipping unsafe bundle member %r in %s", info.filename, archive)
                    continue
                files[relative.as_posix()] = zf.read(info)
        logger.debug("Loaded %d bundled assets from %s", len(files), archive)
        return cls(files, index=index)

    @classmethod
    def from_package(
        cls,
        package: str,
        subdir: str = "build",
        *,
        index: str = "index.html",
    ) -> "BundleSource":
        """Freeze package data (``importlib.resources``) into a bundle.

        Works for packages installed as plain directories and from zip
        imports alike.
        """
        base = resources.files(package).joinpath(subdir)
        if not base.is_dir():
            msg = f"Package {package!r} has no {subdir!r} resource directory"
            raise FileNotFoundError(msg)
        files = dict(_walk_traversable(base, PurePosixPath()))
        logger.debug("Loaded %d bundled assets from %s/%s", len(files), package, subdir)
        return cls(files, index=index)


def _walk_traversable(node: Traversable, prefix: PurePosixPath) -> Iterator[tuple[str, bytes]]:
    """Yield ``(relative_path, bytes)`` for every file below *node*."""
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        relative = prefix / child.name
        if child.is_dir():
            yield from _walk_traversable(child, relative)
        elif child.is_file():
            yield relative.as_posix(), child.read_bytes()
