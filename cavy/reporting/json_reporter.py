"""JSON report model for cavy test runs.

Defines the aggregated report sent to cavy-cli and handles its JSON
serialization, both for the wire and for saving to disk.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class TestResult:
    """Result record for one executed test case."""
    __test__ = False

    message: str
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "passed": self.passed}


@dataclass(frozen=True)
class Report:
    """Aggregated outcome of a full run."""
    results: list[TestResult] = field(default_factory=list)
    error_count: int = 0
    duration: float = 0.0

    @property
    def all_passed(self) -> bool:
        return self.error_count == 0

    @property
    def total_count(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire form cavy-cli expects."""
        return {
            "results": [r.to_dict() for r in self.results],
            "errorCount": self.error_count,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Report":
        """Parse the wire form back into a Report.

        Raises:
            ValueError: If required fields are missing or malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Report must be a mapping, got {type(data).__name__}")

        for field_name in ("results", "errorCount", "duration"):
            if field_name not in data:
                raise ValueError(f"Missing required field '{field_name}' in report")

        results_data = data["results"]
        if not isinstance(results_data, list):
            raise ValueError("'results' must be a list")

        results = []
        for i, r in enumerate(results_data):
            if not isinstance(r, dict) or "message" not in r or "passed" not in r:
                raise ValueError(f"results[{i}] must have 'message' and 'passed'")
            results.append(TestResult(message=str(r["message"]), passed=bool(r["passed"])))

        return cls(
            results=results,
            error_count=int(data["errorCount"]),
            duration=float(data["duration"]),
        )


class JsonReporter:
    """Serializes reports to JSON text and files."""

    def to_json_string(self, report: Report, pretty: bool = False) -> str:
        """Convert report to JSON string.

        Args:
            report: Report to serialize.
            pretty: If True, format with indentation.

        Returns:
            JSON string.
        """
        if pretty:
            return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
        return json.dumps(report.to_dict(), ensure_ascii=False)

    def save(self, report: Report, path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report to save.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_json_string(report, pretty=True))

        return path

    def default_path(self, report_dir: Optional[Path] = None) -> Path:
        """Timestamped report path inside ``report_dir`` (cwd by default)."""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return Path(report_dir or ".") / f"cavy_report_{stamp}.json"
