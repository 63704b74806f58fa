"""Unit tests for the rename command."""

from pathlib import Path

from filemgr.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestRename:
    """Tests for rename."""

    def test_rename_selected(self, sample_dir: Path) -> None:
        """The suffix goes between stem and extension."""
        result = runner.invoke(app, ["rename", "_bak", str(sample_dir), "-s", "a.txt", "--yes"])

        assert result.exit_code == 0
        assert "All 1 item(s) renamed" in result.output
        assert (sample_dir / "a_bak.txt").read_text() == "hello"
        assert not (sample_dir / "a.txt").exists()

    def test_rename_all(self, sample_dir: Path) -> None:
        """Directories and files without extension get the suffix appended."""
        result = runner.invoke(app, ["rename", "_v2", str(sample_dir), "--all", "--yes"])

        assert result.exit_code == 0
        assert sorted(p.name for p in sample_dir.iterdir()) == ["a_v2.txt", "b_v2.log", "sub_v2"]

    def test_empty_suffix(self, sample_dir: Path) -> None:
        """An empty suffix is refused before scanning."""
        result = runner.invoke(app, ["rename", "", str(sample_dir), "--all", "--yes"])

        assert result.exit_code == 1
        assert "Suffix cannot be empty" in result.output
        assert (sample_dir / "a.txt").exists()

    def test_dry_run_shows_new_names(self, sample_dir: Path) -> None:
        """--dry-run previews target names without renaming."""
        result = runner.invoke(
            app,
            ["rename", "_old", str(sample_dir), "-s", "b.log", "--dry-run"],
        )

        assert result.exit_code == 0
        assert "b_old.log" in result.output
        assert "1 item(s) would be renamed" in result.output
        assert (sample_dir / "b.log").exists()

    def test_collision_reported(self, sample_dir: Path) -> None:
        """An existing target name fails the entry and exits 1."""
        (sample_dir / "a_bak.txt").write_text("existing")

        result = runner.invoke(app, ["rename", "_bak", str(sample_dir), "-s", "a.txt", "--yes"])

        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert (sample_dir / "a.txt").read_text() == "hello"
        assert (sample_dir / "a_bak.txt").read_text() == "existing"

    def test_confirm_declined(self, sample_dir: Path) -> None:
        """Answering no leaves names unchanged."""
        result = runner.invoke(
            app,
            ["rename", "_bak", str(sample_dir), "-s", "a.txt"],
            input="n\n",
        )

        assert result.exit_code == 0
        assert "Proceed with renaming 1 item(s)?" in result.output
        assert (sample_dir / "a.txt").exists()

    def test_recursive_rename_in_subdirectory(self, sample_dir: Path) -> None:
        """Entries deeper in the tree are renamed in their own folder."""
        result = runner.invoke(
            app,
            ["rename", "_x", str(sample_dir), "-r", "-f", "c.md", "--all", "--yes"],
        )

        assert result.exit_code == 0
        assert (sample_dir / "sub" / "deep" / "c_x.md").exists()
