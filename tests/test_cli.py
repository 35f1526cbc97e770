"""Tests for the keplerax command line front-end."""

from typer.testing import CliRunner

from keplerax.cli import app

runner = CliRunner()


class TestElements:
    def test_moon(self):
        result = runner.invoke(app, ["elements", "--r", "0", "405400000", "0", "--v", "1090", "0", "0"])
        assert result.exit_code == 0, result.output
        assert "a: 502989447.71" in result.output
        assert "e: 0.194019" in result.output
        assert "period: 3529030.45" in result.output

    def test_degrees(self):
        result = runner.invoke(
            app, ["elements", "--r", "0", "405400000", "0", "--v", "1090", "0", "0", "--degrees"]
        )
        assert result.exit_code == 0, result.output
        assert "i: 180.000000 deg" in result.output

    def test_zero_total_mass_rejected(self):
        result = runner.invoke(
            app, ["elements", "--r", "1", "0", "0", "--v", "0", "1", "0", "--m1", "0", "--m2", "0"]
        )
        assert result.exit_code == 2


class TestState:
    def test_circular_on_rails(self):
        result = runner.invoke(app, ["state", "--a", "7000000", "--e", "0", "--m2", "0"])
        assert result.exit_code == 0, result.output
        assert "r: 7000000.000000" in result.output
        assert "v: " in result.output

    def test_hyperbolic_rejected(self):
        result = runner.invoke(app, ["state", "--a", "7000000", "--e", "1.5"])
        assert result.exit_code == 2

    def test_negative_sma_rejected(self):
        result = runner.invoke(app, ["state", "--a", "-7000000", "--e", "0.1"])
        assert result.exit_code == 2


class TestForce:
    def test_x_axis(self):
        result = runner.invoke(
            app, ["force", "--p1", "200", "0", "0", "--p2", "0", "0", "0", "--m1", "2e6", "--m2", "8e6"]
        )
        assert result.exit_code == 0, result.output
        assert "force: -0.026690" in result.output
        assert "magnitude: 0.026690" in result.output

    def test_coincident_rejected(self):
        result = runner.invoke(app, ["force", "--p1", "1", "1", "1", "--p2", "1", "1", "1"])
        assert result.exit_code == 2

    def test_verbose(self):
        result = runner.invoke(
            app, ["--verbose", "force", "--p1", "200", "0", "0", "--p2", "0", "0", "0", "--m1", "2e6", "--m2", "8e6"]
        )
        assert result.exit_code == 0, result.output
