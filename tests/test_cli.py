"""Tests for the pattern-catalog CLI."""

import json
import logging
import threading
import time

import pytest
from typer.testing import CliRunner

from pattern_catalog.catalog import PatternCatalog, reset_default_catalog
from pattern_catalog.cli import main as cli_main
from pattern_catalog.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the outer environment out of CLI tests."""
    for var in (
        "PATTERN_CATALOG_OUTPUT_FILE",
        "PATTERN_CATALOG_RUN_TIMEOUT",
        "PATTERN_CATALOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_default_catalog()
    yield
    reset_default_catalog()


@pytest.fixture
def failing_catalog(monkeypatch):
    """Replace the default catalog with one holding a failing demo."""
    catalog = PatternCatalog()

    def boom(sink):
        sink.write_line("partial")
        raise ValueError("bad state")

    catalog.register("boom", boom)
    monkeypatch.setattr(cli_main, "default_catalog", lambda: catalog)
    return catalog


@pytest.fixture
def slow_catalog(monkeypatch):
    """Replace the default catalog with one holding a demo that stalls."""
    catalog = PatternCatalog()
    release = threading.Event()

    def slow(sink):
        sink.write_line("started")
        release.wait(5)
        sink.write_line("after-deadline")

    catalog.register("slow", slow)
    monkeypatch.setattr(cli_main, "default_catalog", lambda: catalog)
    yield catalog
    release.set()


@pytest.fixture
def root_level():
    """Restore the root logger level changed by the CLI callback."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestRun:
    """Tests for the run command."""

    def test_run_prints_output(self, runner):
        result = runner.invoke(app, ["run", "facade"])

        assert result.exit_code == 0
        assert "battery 80%: engine started" in result.output
        assert "battery 5%: engine not started" in result.output

    def test_run_unknown_name(self, runner):
        result = runner.invoke(app, ["run", "nonexistent"])

        assert result.exit_code == 1
        assert "NotFoundError: Unknown demonstration 'nonexistent'" in result.output

    def test_run_failing_demo(self, runner, failing_catalog):
        result = runner.invoke(app, ["run", "boom"])

        assert result.exit_code == 1
        assert "partial" in result.output
        assert "ExecutionError" in result.output
        assert "ValueError: bad state" in result.output

    def test_run_with_timeout(self, runner):
        result = runner.invoke(app, ["run", "state", "--timeout", "5"])

        assert result.exit_code == 0
        assert "push: closed -> opened" in result.output

    def test_run_timeout_bounds_the_command(self, runner, slow_catalog):
        start = time.monotonic()
        result = runner.invoke(app, ["run", "slow", "--timeout", "0.2"])
        elapsed = time.monotonic() - start

        assert result.exit_code == 1
        assert elapsed < 3
        assert "started" in result.output
        assert "after-deadline" not in result.output
        assert (
            "DeadlineExceededError: Demonstration 'slow' timed out after 0.2s"
            in result.output
        )

    def test_run_timeout_from_env(self, runner, slow_catalog, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_RUN_TIMEOUT", "0.2")

        result = runner.invoke(app, ["run", "slow"])

        assert result.exit_code == 1
        assert "DeadlineExceededError" in result.output

    def test_run_to_file(self, runner, tmp_path):
        out = tmp_path / "demo.txt"

        result = runner.invoke(app, ["run", "facade", "--output", str(out)])

        assert result.exit_code == 0
        assert "Wrote 2 lines" in result.output
        assert out.read_text(encoding="utf-8") == (
            "battery 80%: engine started\nbattery 5%: engine not started\n"
        )

    def test_run_output_file_from_env(self, runner, tmp_path, monkeypatch):
        out = tmp_path / "env.txt"
        monkeypatch.setenv("PATTERN_CATALOG_OUTPUT_FILE", str(out))

        result = runner.invoke(app, ["run", "adapter"])

        assert result.exit_code == 0
        assert "forward: speed 10" in out.read_text(encoding="utf-8")

    def test_run_unwritable_output(self, runner, tmp_path):
        result = runner.invoke(app, ["run", "facade", "--output", str(tmp_path)])

        assert result.exit_code == 1
        assert "SinkWriteError" in result.output


class TestList:
    """Tests for the list command."""

    def test_list_table(self, runner):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "observer" in result.output
        assert "singleton" in result.output

    def test_list_json(self, runner):
        result = runner.invoke(app, ["list", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 18
        assert data[0] == {
            "name": "mediator",
            "description": "Objects communicate through a central mediator",
            "category": "behavioral",
        }

    def test_list_by_category(self, runner):
        result = runner.invoke(app, ["list", "--category", "creational", "--json"])

        assert result.exit_code == 0
        names = [item["name"] for item in json.loads(result.output)]
        assert names == ["abstract-factory", "factory-method", "builder", "singleton"]


class TestShow:
    """Tests for the show command."""

    def test_show(self, runner):
        result = runner.invoke(app, ["show", "bridge"])

        assert result.exit_code == 0
        assert "bridge" in result.output
        assert "Category: structural" in result.output

    def test_show_unknown(self, runner):
        result = runner.invoke(app, ["show", "nope"])

        assert result.exit_code == 1
        assert "NotFoundError" in result.output


class TestLogging:
    """Tests for log level handling in the CLI callback."""

    def test_verbose_enables_debug(self, runner, root_level, caplog):
        caplog.set_level(logging.DEBUG)

        result = runner.invoke(app, ["--verbose", "run", "facade"])

        assert result.exit_code == 0
        assert root_level.level == logging.DEBUG
        assert any(
            record.levelno == logging.DEBUG
            and "Running demonstration 'facade'" in record.getMessage()
            for record in caplog.records
        )

    def test_log_level_from_env(self, runner, root_level, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "info")

        result = runner.invoke(app, ["run", "facade"])

        assert result.exit_code == 0
        assert root_level.level == logging.INFO

    def test_invalid_log_level(self, runner, root_level, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "LOUD")

        result = runner.invoke(app, ["run", "facade"])

        assert result.exit_code == 1
        assert "ValidationError" in result.output
        assert "log_level" in result.output
        assert "battery" not in result.output
