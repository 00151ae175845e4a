"""Tests for the Report model and JSON serialization."""

import json

import pytest

from cavy.reporting.json_reporter import JsonReporter, Report, TestResult


@pytest.fixture
def report() -> Report:
    return Report(
        results=[
            TestResult("renders home  ✅", True),
            TestResult("shows error  ❌\n   expected text", False),
        ],
        error_count=1,
        duration=2.5,
    )


def test_wire_form_uses_collector_keys(report):
    data = report.to_dict()

    assert set(data) == {"results", "errorCount", "duration"}
    assert data["results"][1] == {"message": "shows error  ❌\n   expected text", "passed": False}
    assert data["errorCount"] == 1


def test_json_string_parses_back(report):
    text = JsonReporter().to_json_string(report)

    assert Report.from_dict(json.loads(text)) == report


@pytest.mark.parametrize("data", [
    [],
    {"results": [], "errorCount": 0},
    {"results": "nope", "errorCount": 0, "duration": 0},
    {"results": [{"message": "x"}], "errorCount": 0, "duration": 0},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        Report.from_dict(data)


def test_save_writes_pretty_json(report, tmp_path):
    reporter = JsonReporter()

    path = reporter.save(report, tmp_path / "nested" / "report.json")

    text = path.read_text(encoding="utf-8")
    assert "\n  " in text
    assert "✅" in text
    assert json.loads(text)["duration"] == 2.5


def test_default_path(tmp_path):
    path = JsonReporter().default_path(tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("cavy_report_")
    assert path.suffix == ".json"


def test_all_passed():
    assert Report().all_passed
    assert Report(results=[TestResult("a", False)], error_count=1).all_passed is False
