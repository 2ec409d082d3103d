"""
Tests for the scripts in examples/ to ensure they run as documented.

Each example is executed as a script; the test checks that it completes and
prints what its comments promise.
"""

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


class TestBasicsExample:
    """Run examples/basics.py end to end."""

    @pytest.mark.integration
    def test_basics_runs_to_completion(self, capsys):
        runpy.run_path(str(EXAMPLES_DIR / "basics.py"), run_name="__main__")

        output = capsys.readouterr().out
        assert "Clicked: OK" in output
        assert "Clicked: Cancel" not in output
        assert "Name changed from Alice to Bob" in output
        assert "Label shows: Frank" in output
        assert "Mirror is still Frank" in output
        assert "Age is now 31" in output
        assert "Score: 0 -> 10" in output
        assert "Logged in: Alice" in output
        assert "Progress 100% on MainThread" in output
