"""Tests for result formatting."""

from __future__ import annotations

import json

from coatcheck.output.console import create_console, get_output
from coatcheck.output.formatters import OutputSettings, format_result
from coatcheck.services.result import ServiceError, ServiceResult


def _scenario_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="run_scenario",
        data={
            "venue": "Opera",
            "narration": ["Greetings Ann. Do you have any coat that I can take?"],
            "stored_coats": [{"owner": "Ann", "coat_type": "Cape"}],
            "present_guests": [{"name": "Ann", "coat_type": None}],
            "departed_guests": [],
        },
    )


class TestFormatResult:
    def test_json(self) -> None:
        out = format_result(_scenario_result(), settings=OutputSettings(json_output=True))
        assert json.loads(out)["data"]["venue"] == "Opera"

    def test_quiet(self) -> None:
        out = format_result(_scenario_result(), settings=OutputSettings(quiet=True))
        assert out == "OK: run_scenario"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="run_scenario",
            error=ServiceError(code="INVALID_ARGUMENT", message="coat must not be None"),
        )
        assert format_result(result) == "ERROR: run_scenario - coat must not be None"

    def test_scenario_rendering(self) -> None:
        out = format_result(_scenario_result())
        assert out.splitlines()[0] == "Greetings Ann. Do you have any coat that I can take?"
        assert "Opera" in out
        assert "Coat room" in out
        assert "Cape" in out
        assert "Guests present" in out

    def test_generic_rendering(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"count": 3, "items": [1, 2]})
        out = format_result(result)
        assert "OK other" in out
        assert "count: 3" in out
        assert "items: 2 item(s)" in out


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"
