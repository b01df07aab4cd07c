"""Tests for the loadreport CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from loadreport import __version__
from loadreport.cli import DEFAULT_CONFIG, app, resolve_options_path, write_outputs
from tests.conftest import make_summary

pytestmark = pytest.mark.cli

runner = CliRunner()


def _write_summary(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "summary.json"
    path.write_text(json.dumps(data))
    return path


class TestResolveOptionsPath:
    """Tests for options file auto-discovery."""

    def test_explicit_path_returned(self, tmp_path):
        p = tmp_path / "custom.yaml"
        assert resolve_options_path(p) == p

    def test_none_finds_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / DEFAULT_CONFIG).write_text("report_name: test\n")
        assert resolve_options_path(None) == Path(DEFAULT_CONFIG)

    def test_none_without_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_options_path(None) is None


class TestWriteOutputs:
    """Tests for write_outputs."""

    def test_skips_console_and_creates_dirs(self, tmp_path):
        outputs = {"nested/dir/report.html": "<html></html>", "stdout": "digest"}
        written = write_outputs(outputs, base_dir=tmp_path)
        assert written == [tmp_path / "nested/dir/report.html"]
        assert written[0].read_text() == "<html></html>"
        assert not (tmp_path / "stdout").exists()

    def test_console_only(self, tmp_path):
        assert write_outputs({"stdout": "x"}, base_dir=tmp_path) == []


class TestRenderCommand:
    """Tests for `loadreport render`."""

    def test_render(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        summary = _write_summary(tmp_path, make_summary())
        result = runner.invoke(app, ["render", str(summary), "--name", "Smoke Run"])
        assert result.exit_code == 0, result.output
        reports = list((tmp_path / "reports").glob("report-smoke-run-executed-*.html"))
        assert len(reports) == 1
        assert "Metrics Overview" in reports[0].read_text()
        assert "Test Execution Summary" in result.output
        assert "OK" in result.output

    def test_output_dir_option(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        summary = _write_summary(tmp_path, {})
        result = runner.invoke(app, ["render", str(summary), "-o", "out"])
        assert result.exit_code == 0, result.output
        assert len(list((tmp_path / "out").glob("report-default-executed-*.html"))) == 1

    def test_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / DEFAULT_CONFIG).write_text("report_name: Nightly\noutput_dir: nightly\n")
        summary = _write_summary(tmp_path, {})
        result = runner.invoke(app, ["render", str(summary)])
        assert result.exit_code == 0, result.output
        assert len(list((tmp_path / "nightly").glob("report-nightly-executed-*.html"))) == 1

    def test_cli_flags_override_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "opts.yaml"
        config.write_text("report_name: FromFile\n")
        summary = _write_summary(tmp_path, {})
        result = runner.invoke(app, ["render", str(summary), "-c", str(config), "-n", "FromCli"])
        assert result.exit_code == 0, result.output
        assert len(list((tmp_path / "reports").glob("report-fromcli-executed-*.html"))) == 1

    def test_missing_summary(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Summary file not found" in result.output

    def test_invalid_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "opts.yaml"
        config.write_text("colour: blue\n")
        summary = _write_summary(tmp_path, {})
        result = runner.invoke(app, ["render", str(summary), "-c", str(config)])
        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output

    def test_generation_failure_exits_nonzero(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        data = make_summary(metrics={"custom": {"values": {"avg": "slow"}}})
        summary = _write_summary(tmp_path, data)
        result = runner.invoke(app, ["render", str(summary)])
        assert result.exit_code == 1
        assert "Error generating report" in result.output
        assert not (tmp_path / "reports").exists()


class TestVersionCommand:
    """Tests for `loadreport version`."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output
