"""Result collector for cavy test runs.

Turns per-case outcomes into result records and keeps the running error
count for a single run.
"""

from dataclasses import dataclass, field
from typing import Union

from ..reporting.json_reporter import Report, TestResult

PASS_MARK = "✅"
FAIL_MARK = "❌"


@dataclass(frozen=True)
class Passed:
    """Outcome of a case whose hook and body completed."""


@dataclass(frozen=True)
class Failed:
    """Outcome of a case whose hook or body raised."""
    message: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "Failed":
        return cls(message=str(error) or type(error).__name__)


Outcome = Union[Passed, Failed]


def format_result(description: str, outcome: Outcome) -> TestResult:
    """Build the console/report record for one case."""
    if isinstance(outcome, Failed):
        return TestResult(
            message=f"{description}  {FAIL_MARK}\n   {outcome.message}",
            passed=False,
        )
    return TestResult(message=f"{description}  {PASS_MARK}", passed=True)


@dataclass
class ResultCollector:
    """Ordered results of the current run."""
    results: list[TestResult] = field(default_factory=list)
    error_count: int = 0

    def record(self, description: str, outcome: Outcome) -> TestResult:
        """Append the result for ``outcome`` and update the error count."""
        result = format_result(description, outcome)
        self.results.append(result)
        if not result.passed:
            self.error_count += 1
        return result

    def reset(self) -> None:
        """Drop results from a previous run."""
        self.results = []
        self.error_count = 0

    def build_report(self, duration: float) -> Report:
        """Snapshot the collected results into a Report."""
        return Report(
            results=list(self.results),
            error_count=self.error_count,
            duration=duration,
        )

