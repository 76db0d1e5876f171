"""Tests for wren.assets.sources — directory and bundle providers."""

import sys
import zipfile
from pathlib import Path, PurePosixPath

import pytest

from wren.assets.sources import Asset, AssetSource, BundleSource, DirectorySource
from wren.errors import AssetReadError


class TestProtocol:
    def test_builtin_sources_satisfy_protocol(self, build_dir: Path) -> None:
        assert isinstance(DirectorySource(build_dir), AssetSource)
        assert isinstance(BundleSource({}), AssetSource)


class TestDirectorySource:
    def test_serves_file(self, build_dir: Path) -> None:
        asset = DirectorySource(build_dir).try_get(PurePosixPath("app.js"))
        assert asset == Asset(path="app.js", body=b"console.log('app');")

    def test_nested_file(self, build_dir: Path) -> None:
        asset = DirectorySource(build_dir).try_get(PurePosixPath("assets/logo.svg"))
        assert asset is not None
        assert asset.path == "assets/logo.svg"

    def test_directory_serves_index(self, build_dir: Path) -> None:
        asset = DirectorySource(build_dir).try_get(PurePosixPath("docs"))
        assert asset is not None
        assert asset.path == "docs/index.html"
        assert asset.body == b"<h1>Docs</h1>"

    def test_empty_relative_serves_root_index(self, build_dir: Path) -> None:
        asset = DirectorySource(build_dir).try_get(PurePosixPath())
        assert asset is not None
        assert asset.path == "index.html"

    def test_directory_without_index_misses(self, build_dir: Path) -> None:
        assert DirectorySource(build_dir).try_get(PurePosixPath("assets")) is None

    def test_missing_file(self, build_dir: Path) -> None:
        assert DirectorySource(build_dir).try_get(PurePosixPath("missing.js")) is None

    def test_custom_index(self, build_dir: Path) -> None:
        (build_dir / "docs" / "home.htm").write_text("home")
        source = DirectorySource(build_dir, index="home.htm")
        asset = source.try_get(PurePosixPath("docs"))
        assert asset is not None
        assert asset.body == b"home"

    def test_root_is_absolute(self, build_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(build_dir.parent)
        assert DirectorySource("build").root == build_dir.absolute()

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_symlink_escape_is_a_miss(self, build_dir: Path) -> None:
        (build_dir / "leak.txt").symlink_to(build_dir.parent / "secret.txt")
        assert DirectorySource(build_dir).try_get(PurePosixPath("leak.txt")) is None

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_symlink_escape_allowed_when_disabled(self, build_dir: Path) -> None:
        (build_dir / "leak.txt").symlink_to(build_dir.parent / "secret.txt")
        source = DirectorySource(build_dir, contain_symlinks=False)
        asset = source.try_get(PurePosixPath("leak.txt"))
        assert asset is not None
        assert asset.body == b"top secret"

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_symlink_inside_root_served(self, build_dir: Path) -> None:
        (build_dir / "alias.js").symlink_to(build_dir / "app.js")
        asset = DirectorySource(build_dir).try_get(PurePosixPath("alias.js"))
        assert asset is not None
        assert asset.path == "alias.js"

    def test_read_failure_raises(self, build_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_read(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", broken_read)
        with pytest.raises(AssetReadError) as exc_info:
            DirectorySource(build_dir).try_get(PurePosixPath("app.js"))

        assert exc_info.value.path == build_dir / "app.js"
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert "Permission denied" in str(exc_info.value)


class TestBundleSource:
    def test_hit(self) -> None:
        bundle = BundleSource({"app.wasm": b"\x00asm"})
        assert bundle.try_get(PurePosixPath("app.wasm")) == Asset("app.wasm", b"\x00asm")

    def test_miss(self) -> None:
        assert BundleSource({"a.js": b""}).try_get(PurePosixPath("b.js")) is None

    def test_empty_path_defaults_to_index(self) -> None:
        bundle = BundleSource({"index.html": b"<html>"})
        asset = bundle.try_get(PurePosixPath())
        assert asset is not None
        assert asset.path == "index.html"

    def test_nested_key(self) -> None:
        bundle = BundleSource({"assets/logo.svg": b"<svg/>"})
        assert bundle.try_get(PurePosixPath("assets/logo.svg")) is not None

    def test_copied_and_read_only(self) -> None:
        files = {"a.js": b"1"}
        bundle = BundleSource(files)
        files["b.js"] = b"2"
        assert "b.js" not in bundle
        with pytest.raises(TypeError):
            bundle.files["c.js"] = b"3"  # type: ignore[index]

    def test_len_and_repr(self) -> None:
        bundle = BundleSource({"a": b"", "b": b""})
        assert len(bundle) == 2
        assert repr(bundle) == "BundleSource(<2 files>)"


class TestBundleLoaders:
    def test_from_directory(self, build_dir: Path) -> None:
        bundle = BundleSource.from_directory(build_dir)
        assert bundle.files["index.html"] == b"<h1>App</h1>"
        assert bundle.files["docs/index.html"] == b"<h1>Docs</h1>"
        assert "docs" not in bundle

    def test_from_directory_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            BundleSource.from_directory(tmp_path / "nope")

    def test_from_zip(self, tmp_path: Path) -> None:
        archive = tmp_path / "bundle.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("index.html", "<h1>Zip</h1>")
            zf.writestr("assets/", "")
            zf.writestr("assets/app.wasm", b"\x00asm")
            zf.writestr("./style.css", "x")

        bundle = BundleSource.from_zip(archive)
        assert set(bundle.files) == {"index.html", "assets/app.wasm", "style.css"}
        assert bundle.files["assets/app.wasm"] == b"\x00asm"

    def test_from_zip_skips_unsafe_members(self, tmp_path: Path) -> None:
        archive = tmp_path / "evil.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("../escape.js", "x")
            zf.writestr("ok.js", "x")

        bundle = BundleSource.from_zip(archive)
        assert list(bundle.files) == ["ok.js"]

    def test_from_package(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        package = tmp_path / "shellapp"
        build = package / "build" / "assets"
        build.mkdir(parents=True)
        (package / "__init__.py").write_text("")
        (package / "build" / "index.html").write_text("<h1>Pkg</h1>")
        (build / "app.js").write_text("1")
        monkeypatch.syspath_prepend(str(tmp_path))

        bundle = BundleSource.from_package("shellapp")
        assert bundle.files == {"assets/app.js": b"1", "index.html": b"<h1>Pkg</h1>"}

    def test_from_package_missing_subdir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "emptyapp"
        package.mkdir()
        (package / "__init__.py").write_text("")
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(FileNotFoundError):
            BundleSource.from_package("emptyapp")
