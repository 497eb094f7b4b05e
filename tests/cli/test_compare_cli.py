"""Tests for the cast-diff command line."""

import logging

import pytest
from typer.testing import CliRunner

from cast_diff import __version__
from cast_diff.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Keep user and project config files out of CLI runs."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    for var in ("CAST_DIFF_TIME_TOLERANCE_MS", "CAST_DIFF_HEADER_FIELDS", "CAST_DIFF_VERBOSITY"):
        monkeypatch.delenv(var, raising=False)


def _run(casts_dir, *args):
    resolved = [str(casts_dir / a) if a.endswith(".cast") else a for a in args]
    return runner.invoke(app, resolved)


class TestVerdict:
    def test_equal_with_tolerance(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast", "-t", "50")
        assert result.exit_code == 0
        assert "casts are equal" in result.stdout

    def test_long_tolerance_flag(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast", "--time-tolerance", "50")
        assert result.exit_code == 0

    def test_not_equal_without_tolerance(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast")
        assert result.exit_code == 2
        assert "casts are not equal" in result.stdout

    def test_length_difference(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "foo-short.cast")
        assert result.exit_code == 2

    def test_header_field(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast", "-t", "50", "-h", "timestamp")
        assert result.exit_code == 2

    def test_repeated_header_fields(self, casts_dir):
        result = _run(
            casts_dir, "foo.cast", "bar.cast", "-t", "50",
            "--header", "width", "--header", "height", "-h", "env",
        )
        assert result.exit_code == 0

    def test_quiet(self, casts_dir):
        equal = _run(casts_dir, "foo.cast", "bar.cast", "-t", "50", "-q")
        assert equal.exit_code == 0
        assert equal.stdout == ""

        differ = _run(casts_dir, "foo.cast", "bar.cast", "--quiet")
        assert differ.exit_code == 2
        assert differ.stdout == ""

    def test_verbose_shows_mismatch(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast", "-v")
        assert result.exit_code == 2
        assert "EVENT" in result.output
        assert "line 2" in result.output

    def test_tolerance_from_config_file(self, casts_dir, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text("time_tolerance_ms = 50\n")
        result = _run(casts_dir, "foo.cast", "bar.cast", "--config", str(config))
        assert result.exit_code == 0

    def test_flag_overrides_config_file(self, casts_dir, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text("time_tolerance_ms = 50\n")
        result = _run(casts_dir, "foo.cast", "bar.cast", "-c", str(config), "-t", "0")
        assert result.exit_code == 2


class TestVerbosityFromConfig:
    def test_env_verbosity_sets_log_level(self, casts_dir, monkeypatch, tmp_path):
        monkeypatch.setenv("CAST_DIFF_VERBOSITY", "verbose")
        log_file = tmp_path / "run.log"
        result = _run(casts_dir, "foo.cast", "bar.cast", "--log-file", str(log_file))

        assert result.exit_code == 2
        assert logging.getLogger("cast_diff").level == logging.DEBUG
        assert "Loaded config" in log_file.read_text(encoding="utf-8")

    def test_config_file_quiet_sets_log_level(self, casts_dir, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text('verbosity = "quiet"\n')
        result = _run(casts_dir, "foo.cast", "bar.cast", "-c", str(config))

        assert result.exit_code == 2
        assert result.stdout == ""
        assert logging.getLogger("cast_diff").level == logging.ERROR

    def test_flag_overrides_config_verbosity(self, casts_dir, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text('verbosity = "quiet"\n')
        result = _run(casts_dir, "foo.cast", "bar.cast", "-c", str(config), "-v")

        assert result.exit_code == 2
        assert "casts are not equal" in result.stdout
        assert logging.getLogger("cast_diff").level == logging.DEBUG


class TestErrors:
    def test_missing_file(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "does-not-exist.cast")
        assert result.exit_code == 1
        assert "casts are" not in result.stdout

    def test_malformed_event(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bad-event.cast")
        assert result.exit_code == 1
        assert "casts are" not in result.stdout

    def test_malformed_header(self, casts_dir):
        result = _run(casts_dir, "bad-header.cast", "foo.cast")
        assert result.exit_code == 1

    def test_invalid_config(self, casts_dir, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text("time_tolerance_ms = -3\n")
        result = _run(casts_dir, "foo.cast", "bar.cast", "-c", str(config))
        assert result.exit_code == 1

    def test_missing_config_file(self, casts_dir, tmp_path):
        result = _run(casts_dir, "foo.cast", "foo.cast", "-c", str(tmp_path / "nope.toml"))
        assert result.exit_code == 1
        assert "Config file not found" in result.output
        assert "casts are" not in result.stdout

    def test_config_path_is_directory(self, casts_dir, tmp_path):
        result = _run(casts_dir, "foo.cast", "foo.cast", "-c", str(tmp_path))
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, casts_dir):
        result = _run(casts_dir, "foo.cast", "bar.cast", "-v", "-q")
        assert result.exit_code == 1


class TestMeta:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--time-tolerance" in result.stdout
