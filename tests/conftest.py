"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from filekit.core.models import LocationKind
from filekit.core.storage import LocalStorage
from filekit.locations import Folder


class SwitchableStorage(LocalStorage):
    """Local storage whose existence checks can be switched off.

    Mimics a backend that suddenly reports no entries at all, e.g. a
    mocked file manager in tests of custom backends.
    """

    def __init__(self) -> None:
        super().__init__()
        self.no_locations_exist = False
        self.exists_calls: list[tuple[str, LocationKind]] = []

    def location_exists(self, path: str, kind: LocationKind) -> bool:
        self.exists_calls.append((path, kind))
        if self.no_locations_exist:
            return False
        return super().location_exists(path, kind)


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Point XDG_CONFIG_HOME at an empty directory so user settings never leak in."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg-config")))


@pytest.fixture
def storage() -> LocalStorage:
    """Local storage backend with default settings."""
    return LocalStorage()


@pytest.fixture
def switchable_storage() -> SwitchableStorage:
    """Local storage backend whose existence checks can be disabled."""
    return SwitchableStorage()


@pytest.fixture
def folder(tmp_path: Path, storage: LocalStorage) -> Folder:
    """Empty Folder bound to a per-test temporary directory."""
    return Folder(str(tmp_path), storage)


@pytest.fixture
def nested_tree(folder: Folder) -> Folder:
    """Folder with two subfolders, each holding two subfolders and one file per folder.

    Layout:
        1/File1, 1/A/File1A, 1/B/File1B, 2/File2, 2/A/File2A, 2/B/File2B
    """
    for top in ("1", "2"):
        subfolder = folder.create_subfolder(top)
        subfolder.create_file(f"File{top}")
        for leaf in ("A", "B"):
            subfolder.create_subfolder(leaf).create_file(f"File{top}{leaf}")
    return folder
