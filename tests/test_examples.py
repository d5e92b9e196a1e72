"""Tests for the command-line example scripts."""

import importlib.util
from pathlib import Path

import pytest

typer = pytest.importorskip("typer")
from typer.testing import CliRunner  # noqa: E402

_SCRIPT = Path(__file__).resolve().parents[1] / "examples" / "convert_positions.py"


@pytest.fixture(scope="module")
def app():
    spec = importlib.util.spec_from_file_location("convert_positions", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.fixture
def runner():
    return CliRunner()


# ---------------------------------------------------------------------------
# convert_positions.py
# ---------------------------------------------------------------------------


class TestConvertPositions:
    def test_negative_latitude(self, app, runner):
        result = runner.invoke(app, ["ICRS2GAL", "266.40499", "-28.93617"])
        assert result.exit_code == 0, result.output
        assert "galactic" in result.output

    def test_negative_longitude_and_latitude(self, app, runner):
        result = runner.invoke(app, ["GAL2ICRS", "-10.5", "-2.25"])
        assert result.exit_code == 0, result.output

    def test_double_dash_separator(self, app, runner):
        result = runner.invoke(app, ["--check", "ICRS2GAL", "--", "266.40499", "-28.93617"])
        assert result.exit_code == 0, result.output
        assert "round-trip error" in result.output

    def test_sexagesimal(self, app, runner):
        result = runner.invoke(
            app, ["icrs2gal", "17:45:37.2", "-28:56:10.2", "--sexagesimal"]
        )
        assert result.exit_code == 0, result.output
        assert "(266.405000, -28.936167)" in result.output

    def test_unknown_transformation_exits_with_error(self, app, runner):
        result = runner.invoke(app, ["ICRS2FK5", "0", "0"])
        assert result.exit_code == 1
