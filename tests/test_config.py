"""Tests for report options loading."""

import pytest

from loadreport.config import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ReportOptions,
    load_options,
    validate_options,
)


class TestReportOptions:
    """Tests for the ReportOptions model."""

    def test_defaults(self):
        options = ReportOptions()
        assert options.report_name is None
        assert options.output_dir is None

    def test_aliases(self):
        options = ReportOptions.model_validate({"reportName": "Smoke", "outputDir": "out"})
        assert options.report_name == "Smoke"
        assert options.output_dir == "out"

    def test_trailing_slash_stripped(self):
        assert ReportOptions(output_dir="out/").output_dir == "out"

    def test_merged_overrides(self):
        base = ReportOptions(report_name="file", output_dir="a")
        merged = base.merged(report_name="cli", output_dir=None)
        assert merged.report_name == "cli"
        assert merged.output_dir == "a"
        assert base.report_name == "file"


class TestValidateOptions:
    """Tests for validate_options."""

    def test_none(self):
        assert validate_options(None) == ReportOptions()

    def test_passthrough(self):
        options = ReportOptions(report_name="x")
        assert validate_options(options) is options

    def test_unknown_key(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            validate_options({"colour": "blue"})
        assert "colour" in str(exc_info.value)
        assert exc_info.value.errors


class TestLoadOptions:
    """Tests for load_options."""

    def test_load(self, tmp_path):
        path = tmp_path / "loadreport.yaml"
        path.write_text("report_name: Nightly Soak\noutput_dir: build/reports\n")
        options = load_options(path)
        assert options.report_name == "Nightly Soak"
        assert options.output_dir == "build/reports"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "loadreport.yaml"
        path.write_text("")
        assert load_options(path) == ReportOptions()

    def test_missing(self, tmp_path):
        with pytest.raises(ConfigFileNotFoundError):
            load_options(tmp_path / "missing.yaml")

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "loadreport.yaml"
        path.write_text("report_name: [unclosed\n")
        with pytest.raises(ConfigParseError):
            load_options(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "loadreport.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigParseError):
            load_options(path)
