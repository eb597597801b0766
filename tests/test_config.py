"""
Tests for testconsole/config.py
"""
import pydantic
import pytest

from testconsole.config import ReporterOptions, load_options
from testconsole.output_level import OutputLevel


def test_defaults():
    opts = ReporterOptions()
    assert opts.output_level is OutputLevel.NORMAL
    assert opts.use_color is None
    assert opts.color_scheme == "default"


def test_output_level_accepts_names():
    assert ReporterOptions(output_level="progress-only").output_level is OutputLevel.PROGRESS_ONLY
    assert ReporterOptions(output_level=3).output_level is OutputLevel.VERBOSE


def test_invalid_output_level_fails_fast():
    with pytest.raises(pydantic.ValidationError, match="Invalid output level"):
        ReporterOptions(output_level="chatty")


def test_invalid_color_scheme_fails_fast():
    with pytest.raises(pydantic.ValidationError, match="unknown color scheme"):
        ReporterOptions(color_scheme="neon")


def test_options_are_frozen():
    with pytest.raises(pydantic.ValidationError):
        ReporterOptions().use_color = True


def test_load_options_from_yaml(tmp_path):
    path = tmp_path / "reporter.yaml"
    path.write_text("output_level: verbose\nuse_color: false\n")

    opts = load_options(str(path))

    assert opts.output_level is OutputLevel.VERBOSE
    assert opts.use_color is False


def test_load_options_from_reporter_section(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("suite: smoke\nreporter:\n  output_level: silent\n")

    assert load_options(str(path)).output_level is OutputLevel.SILENT


def test_load_options_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_options(str(path)) == ReporterOptions()
