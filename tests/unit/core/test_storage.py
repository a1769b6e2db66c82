"""Unit tests for the local storage backend.

Tests run against real temporary directories; failures that cannot be
provoked reliably (e.g. permission errors as root) are mocked.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from filekit.core.config import FilekitSettings
from filekit.core.models import ItemAttributes, LocationKind
from filekit.core.storage import LocalStorage


class TestSettingsAccess:
    """Tests for settings exposed by the backend."""

    def test_defaults(self) -> None:
        """A backend without settings uses the defaults."""
        storage = LocalStorage()

        assert storage.hidden_prefix == "."
        assert storage.encoding == "utf-8"
        assert storage.root_path == "/"

    def test_custom_settings(self) -> None:
        """A backend exposes the settings it was created with."""
        storage = LocalStorage(FilekitSettings(hidden_prefix="_", encoding="latin-1"))

        assert storage.hidden_prefix == "_"
        assert storage.encoding == "latin-1"

    def test_from_config(self) -> None:
        """from_config builds the backend from the user's settings."""
        settings = FilekitSettings(hidden_prefix="#")

        with patch("filekit.core.storage.load_settings", return_value=settings):
            storage = LocalStorage.from_config()

        assert storage.settings is settings


class TestLocationExists:
    """Tests for LocalStorage.location_exists."""

    def test_folder(self, tmp_path: Path) -> None:
        """Directories exist as folders but not as files."""
        storage = LocalStorage()

        assert storage.location_exists(f"{tmp_path}/", LocationKind.FOLDER)
        assert not storage.location_exists(f"{tmp_path}/", LocationKind.FILE)

    def test_file(self, tmp_path: Path) -> None:
        """Regular files exist as files but not as folders."""
        (tmp_path / "a.txt").write_text("x")
        storage = LocalStorage()

        assert storage.location_exists(str(tmp_path / "a.txt"), LocationKind.FILE)
        assert not storage.location_exists(str(tmp_path / "a.txt"), LocationKind.FOLDER)

    def test_missing(self, tmp_path: Path) -> None:
        """Nothing exists at a missing path or an empty path."""
        storage = LocalStorage()

        assert not storage.location_exists(str(tmp_path / "nope"), LocationKind.FILE)
        assert not storage.location_exists("", LocationKind.FOLDER)

    def test_symlink_to_directory_is_folder(self, tmp_path: Path) -> None:
        """Links are followed when determining the kind."""
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")
        storage = LocalStorage()

        assert storage.location_exists(f"{tmp_path}/link/", LocationKind.FOLDER)


class TestListEntries:
    """Tests for LocalStorage.list_entries."""

    def test_lists_names(self, tmp_path: Path) -> None:
        """Entry names include files, folders and hidden entries."""
        (tmp_path / "a.txt").write_text("x")
        (tmp_path / "sub").mkdir()
        (tmp_path / ".hidden").write_text("x")

        result = LocalStorage().list_entries(f"{tmp_path}/")

        assert sorted(result) == [".hidden", "a.txt", "sub"]

    def test_missing_directory_lists_empty(self, tmp_path: Path) -> None:
        """A missing directory lists as empty instead of raising."""
        assert LocalStorage().list_entries(str(tmp_path / "nope")) == []

    def test_permission_denied_lists_empty(self, tmp_path: Path) -> None:
        """An unreadable directory lists as empty."""
        with patch("filekit.core.storage.os.listdir", side_effect=PermissionError("denied")):
            result = LocalStorage().list_entries(str(tmp_path))

        assert result == []


class TestAttributes:
    """Tests for LocalStorage.attributes."""

    def test_existing_file(self, tmp_path: Path) -> None:
        """Dates are timezone aware and size matches the content."""
        target = tmp_path / "a.txt"
        target.write_bytes(b"12345")

        attrs = LocalStorage().attributes(str(target))

        assert attrs.size_bytes == 5
        assert attrs.creation_date is not None
        assert attrs.modification_date is not None
        assert attrs.modification_date.tzinfo is not None

    def test_missing_entry(self, tmp_path: Path) -> None:
        """A missing entry yields empty attributes."""
        assert LocalStorage().attributes(str(tmp_path / "nope")) == ItemAttributes()


class TestCreate:
    """Tests for file and directory creation."""

    def test_create_file_with_contents(self, tmp_path: Path) -> None:
        """A new file is created with the given contents."""
        target = tmp_path / "a.bin"

        assert LocalStorage().create_file(str(target), b"\x00\x01")
        assert target.read_bytes() == b"\x00\x01"

    def test_create_empty_file(self, tmp_path: Path) -> None:
        """Without contents an empty file is created."""
        target = tmp_path / "empty"

        assert LocalStorage().create_file(str(target))
        assert target.read_bytes() == b""

    def test_create_file_refuses_existing(self, tmp_path: Path) -> None:
        """An existing file is never overwritten."""
        target = tmp_path / "a.txt"
        target.write_text("keep")

        assert not LocalStorage().create_file(str(target), b"new")
        assert target.read_text() == "keep"

    def test_create_file_in_missing_directory(self, tmp_path: Path) -> None:
        """Creation fails when the parent directory is missing."""
        assert not LocalStorage().create_file(str(tmp_path / "no" / "a.txt"))

    def test_create_directory_with_parents(self, tmp_path: Path) -> None:
        """Intermediate directories are created by default."""
        LocalStorage().create_directory(str(tmp_path / "a" / "b"))

        assert (tmp_path / "a" / "b").is_dir()

    def test_create_directory_existing_fails(self, tmp_path: Path) -> None:
        """Creating an existing directory fails unless exist_ok."""
        storage = LocalStorage()

        with pytest.raises(FileExistsError):
            storage.create_directory(str(tmp_path))
        storage.create_directory(str(tmp_path), exist_ok=True)

    def test_create_directory_without_parents(self, tmp_path: Path) -> None:
        """Without parents a missing intermediate directory is an error."""
        storage = LocalStorage()

        with pytest.raises(FileNotFoundError):
            storage.create_directory(str(tmp_path / "a" / "b"), parents=False)
        storage.create_directory(str(tmp_path), parents=False, exist_ok=True)


class TestMoveCopyRemove:
    """Tests for move, copy and remove."""

    def test_move_file(self, tmp_path: Path) -> None:
        """A moved file disappears from its source."""
        (tmp_path / "a.txt").write_text("x")

        LocalStorage().move(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))

        assert not (tmp_path / "a.txt").exists()
        assert (tmp_path / "b.txt").read_text() == "x"

    def test_move_refuses_existing_destination(self, tmp_path: Path) -> None:
        """Moving onto an existing entry fails and keeps both."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.txt").write_text("b")

        with pytest.raises(FileExistsError):
            LocalStorage().move(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))

        assert (tmp_path / "b.txt").read_text() == "b"

    def test_move_folder_with_trailing_separator(self, tmp_path: Path) -> None:
        """Folder paths may carry a trailing separator."""
        (tmp_path / "src").mkdir()

        LocalStorage().move(f"{tmp_path}/src/", f"{tmp_path}/dst/")

        assert (tmp_path / "dst").is_dir()

    def test_copy_directory_recursively(self, tmp_path: Path) -> None:
        """Directories are copied with their contents."""
        (tmp_path / "src" / "inner").mkdir(parents=True)
        (tmp_path / "src" / "inner" / "f").write_text("x")

        LocalStorage().copy(f"{tmp_path}/src/", f"{tmp_path}/dst/")

        assert (tmp_path / "dst" / "inner" / "f").read_text() == "x"
        assert (tmp_path / "src" / "inner" / "f").exists()

    def test_copy_refuses_existing_destination(self, tmp_path: Path) -> None:
        """Copying onto an existing entry fails."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.txt").write_text("b")

        with pytest.raises(FileExistsError):
            LocalStorage().copy(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))

    def test_remove_directory_recursively(self, tmp_path: Path) -> None:
        """Directories are removed with everything inside."""
        (tmp_path / "d" / "e").mkdir(parents=True)
        (tmp_path / "d" / "e" / "f").write_text("x")

        LocalStorage().remove(f"{tmp_path}/d/")

        assert not (tmp_path / "d").exists()

    def test_remove_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Removing a link to a directory removes only the link."""
        (tmp_path / "real").mkdir()
        (tmp_path / "real" / "f").write_text("x")
        (tmp_path / "link").symlink_to(tmp_path / "real")

        LocalStorage().remove(f"{tmp_path}/link/")

        assert not os.path.lexists(tmp_path / "link")
        assert (tmp_path / "real" / "f").exists()

    def test_remove_missing_raises(self, tmp_path: Path) -> None:
        """Removing a missing entry raises OSError."""
        with pytest.raises(OSError):
            LocalStorage().remove(str(tmp_path / "nope"))


class TestContent:
    """Tests for reading, writing and appending."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        """write_bytes replaces the content read back by read_bytes."""
        target = tmp_path / "a.bin"
        target.write_bytes(b"old content")
        storage = LocalStorage()

        storage.write_bytes(str(target), b"new")

        assert storage.read_bytes(str(target)) == b"new"

    def test_read_missing_raises(self, tmp_path: Path) -> None:
        """Reading a missing file raises OSError."""
        with pytest.raises(OSError):
            LocalStorage().read_bytes(str(tmp_path / "nope"))

    def test_open_for_appending_keeps_content(self, tmp_path: Path) -> None:
        """The handle does not truncate the file."""
        target = tmp_path / "log"
        target.write_bytes(b"one")

        with LocalStorage().open_for_appending(str(target)) as handle:
            handle.seek(0, os.SEEK_END)
            handle.write(b"two")

        assert target.read_bytes() == b"onetwo"

    def test_open_for_appending_requires_existing_file(self, tmp_path: Path) -> None:
        """Appending to a missing file raises instead of creating it."""
        with pytest.raises(FileNotFoundError):
            LocalStorage().open_for_appending(str(tmp_path / "nope"))

        assert not (tmp_path / "nope").exists()


class TestEnvironment:
    """Tests for environment lookups."""

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """current_directory follows the process working directory."""
        monkeypatch.chdir(tmp_path)

        assert LocalStorage().current_directory() == os.getcwd()

    def test_home_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """home_directory honours HOME."""
        monkeypatch.setenv("HOME", str(tmp_path))

        assert LocalStorage().home_directory() == str(tmp_path)

    def test_temporary_directory(self) -> None:
        """temporary_directory points to an existing directory."""
        assert os.path.isdir(LocalStorage().temporary_directory())
