"""Unit tests for the empty command."""

from pathlib import Path
from unittest.mock import patch

import pytest
from filekit.cli.main import app
from filekit.core.storage import LocalStorage
from filekit.locations import Folder
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def cluttered(folder: Folder) -> Folder:
    """Folder with visible and hidden files and subfolders."""
    folder.create_file("a.txt")
    folder.create_file(".env")
    folder.create_subfolder("build").create_file("out.o")
    folder.create_subfolder(".git")
    return folder


class TestEmpty:
    """Tests for filekit empty command."""

    def test_confirmed(self, cluttered: Folder) -> None:
        """Confirming deletes visible entries and keeps hidden ones."""
        result = runner.invoke(app, ["empty", cluttered.path], input="y\n")

        assert result.exit_code == 0
        assert "Planned Deletions" in result.stdout
        assert "Emptied" in result.stdout
        assert cluttered.files.names() == []
        assert cluttered.subfolders.names() == []
        assert cluttered.files.including_hidden.names() == [".env"]
        assert "Kept 2 hidden item(s)" in " ".join(result.output.split())

    def test_declined(self, cluttered: Folder) -> None:
        """Declining the prompt deletes nothing."""
        result = runner.invoke(app, ["empty", cluttered.path], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.stdout
        assert cluttered.files.names() == ["a.txt"]

    def test_yes_skips_prompt(self, cluttered: Folder) -> None:
        """--yes deletes without asking."""
        result = runner.invoke(app, ["empty", cluttered.path, "--yes"])

        assert result.exit_code == 0
        assert "Proceed" not in result.stdout
        assert cluttered.subfolders.count() == 0

    def test_hidden(self, cluttered: Folder) -> None:
        """--hidden deletes hidden entries too."""
        result = runner.invoke(app, ["empty", cluttered.path, "--hidden", "-y"])

        assert result.exit_code == 0
        assert cluttered.files.including_hidden.count() == 0
        assert cluttered.subfolders.including_hidden.count() == 0

    def test_dry_run(self, cluttered: Folder) -> None:
        """--dry-run shows the plan without deleting."""
        result = runner.invoke(app, ["empty", cluttered.path, "--dry-run"])

        assert result.exit_code == 0
        assert "Dry-run: 2 item(s) would be deleted." in result.stdout
        assert "a.txt" in result.stdout
        assert cluttered.files.names() == ["a.txt"]
        assert cluttered.subfolders.names() == ["build"]

    def test_already_empty(self, folder: Folder) -> None:
        """An empty folder needs no confirmation."""
        result = runner.invoke(app, ["empty", folder.path])

        assert result.exit_code == 0
        assert "already empty" in " ".join(result.stdout.split())

    def test_missing_folder(self, tmp_path: Path) -> None:
        """A missing folder is an error."""
        result = runner.invoke(app, ["empty", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_path_required(self) -> None:
        """The folder argument is mandatory."""
        result = runner.invoke(app, ["empty"])

        assert result.exit_code != 0

    def test_deletion_failure(self, cluttered: Folder) -> None:
        """A failed deletion exits with an error."""
        with patch.object(LocalStorage, "remove", side_effect=PermissionError("denied")):
            result = runner.invoke(app, ["empty", cluttered.path, "-y"])

        assert result.exit_code == 1
        assert "delete_failed" in result.output
