from __future__ import annotations

from pathlib import Path

from credwallet import runtime_paths


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "credwallet"
    assert (root / "ui" / "themes").exists()


def test_builtin_theme_root_and_files_resolve() -> None:
    root = runtime_paths.builtin_themes_root()
    assert root.name == "builtin"
    files = runtime_paths.builtin_theme_files()
    assert files
    assert all(path.name == "theme.yaml" and path.parent.parent == root for path in files)


def test_builtin_theme_files_empty_when_root_missing(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(runtime_paths, "builtin_themes_root", lambda: tmp_path / "missing")
    assert runtime_paths.builtin_theme_files() == []


def test_theme_bundle_files_filters_by_suffix(tmp_path: Path) -> None:
    for name in ("b.yml", "a.yaml", "c.JSON", "notes.txt"):
        (tmp_path / name).write_text("{}", encoding="utf-8")
    (tmp_path / "nested.yaml").mkdir()

    assert [path.name for path in runtime_paths.theme_bundle_files(tmp_path)] == [
        "a.yaml",
        "b.yml",
        "c.JSON",
    ]
    assert runtime_paths.theme_bundle_files(tmp_path / "missing") == []


def test_frozen_prefers_meipass_credwallet_dir(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    package_root = bundle_root / "credwallet"
    package_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == package_root
    assert runtime_paths.builtin_themes_root() == package_root / "ui" / "themes" / "builtin"


def test_frozen_falls_back_to_meipass_when_credwallet_missing(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    bundle_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == bundle_root
