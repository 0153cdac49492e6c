import logging
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from main import cli


class TestCli:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def scans(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for name in "abcde":
            Path(f"{name}.jpg").write_text(name, encoding="utf-8")
        return tmp_path

    def test_dry_run_is_default(self, runner: CliRunner, scans: Path, caplog):
        caplog.set_level(logging.INFO)
        result = runner.invoke(cli, ["photo-{padded_idx}.jpg", "from-files", "a.jpg", "b.jpg"])
        assert result.exit_code == 0, result.output
        assert Path("a.jpg").exists()
        assert not Path("photo-0.jpg").exists()
        assert "doing a dry run of all moves" in caplog.text
        assert "use the `--go` flag" in caplog.text

    def test_go_renames_files_in_given_order(self, runner: CliRunner, scans: Path):
        result = runner.invoke(
            cli, ["--go", "photo-{padded_idx}.jpg", "from-files", "c.jpg", "a.jpg", "b.jpg"]
        )
        assert result.exit_code == 0, result.output
        assert Path("photo-0.jpg").read_text(encoding="utf-8") == "c"
        assert Path("photo-1.jpg").read_text(encoding="utf-8") == "a"
        assert Path("photo-2.jpg").read_text(encoding="utf-8") == "b"

    def test_single_sided_scans_from_glob(self, runner: CliRunner, scans: Path):
        result = runner.invoke(
            cli,
            ["--go", "--order", "single-sided-scans", "s{padded_idx}.jpg", "from-glob", "*.jpg"],
        )
        assert result.exit_code == 0, result.output
        contents = [Path(f"s{i}.jpg").read_text(encoding="utf-8") for i in range(5)]
        assert contents == ["a", "e", "b", "d", "c"]

    def test_glob_sort_by_discovered(self, runner: CliRunner, scans: Path, monkeypatch):
        def fake_walk(top, onerror=None):
            yield str(top), [], ["c.jpg", "a.jpg", "b.jpg"]

        monkeypatch.setattr(os, "walk", fake_walk)
        result = runner.invoke(
            cli, ["--go", "n{padded_idx}.jpg", "from-glob", "*.jpg", "--sort-by", "discovered"]
        )
        assert result.exit_code == 0, result.output
        contents = [Path(f"n{i}.jpg").read_text(encoding="utf-8") for i in range(3)]
        assert contents == ["c", "a", "b"]

    def test_brace_glob(self, runner: CliRunner, scans: Path):
        Path("f.png").write_text("f", encoding="utf-8")
        result = runner.invoke(cli, ["--go", "m{padded_idx}", "from-glob", "*.{jpg,png}"])
        assert result.exit_code == 0, result.output
        contents = [Path(f"m{i}").read_text(encoding="utf-8") for i in range(6)]
        assert contents == ["a", "b", "c", "d", "e", "f"]

    def test_malformed_glob_fails(self, runner: CliRunner, scans: Path):
        result = runner.invoke(cli, ["--go", "m{padded_idx}.jpg", "from-glob", "[a.jpg"])
        assert result.exit_code == 1
        assert "failed to parse glob" in result.output
        assert Path("a.jpg").exists()

    def test_verbose_logs_each_move(self, runner: CliRunner, scans: Path, caplog):
        result = runner.invoke(cli, ["--go", "-v", "v{padded_idx}.jpg", "from-files", "a.jpg", "b.jpg"])
        assert result.exit_code == 0, result.output
        debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert "[0] renaming 'a.jpg' to 'v0.jpg'" in debug
        assert "[1] renaming 'b.jpg' to 'v1.jpg'" in debug

    def test_literal_pattern_bails_without_allow_warnings(self, runner: CliRunner, scans: Path, caplog):
        result = runner.invoke(cli, ["--go", "asdf.txt", "from-files", "a.jpg"])
        assert result.exit_code == 1
        assert "bailing" in result.output
        assert "does not have any dynamic content" in caplog.text
        assert Path("a.jpg").exists()

    def test_literal_pattern_allowed(self, runner: CliRunner, scans: Path):
        result = runner.invoke(cli, ["--allow-warnings", "asdf.txt", "from-files", "a.jpg"])
        assert result.exit_code == 0, result.output
        assert Path("a.jpg").exists()

    def test_bad_pattern_reports_offset(self, runner: CliRunner, scans: Path):
        result = runner.invoke(cli, ["--go", "img_{bad}", "from-files", "a.jpg"])
        assert result.exit_code == 1
        assert "img_{bad}" in result.output
        assert "beyond index 5" in result.output
        assert Path("a.jpg").exists()

    def test_failed_rename_does_not_abort(self, runner: CliRunner, scans: Path, caplog):
        result = runner.invoke(
            cli, ["--go", "r{padded_idx}.jpg", "from-files", "a.jpg", "gone.jpg", "b.jpg"]
        )
        assert result.exit_code == 0, result.output
        assert Path("r0.jpg").exists()
        assert Path("r2.jpg").exists()
        assert "failed to rename file 'gone.jpg'" in caplog.text
