"""Runner module - Test orchestration."""

from .executor import CaseState, TestRunner
from .result_collector import Failed, Outcome, Passed, ResultCollector

__all__ = [
    "CaseState",
    "TestRunner",
    "Failed",
    "Outcome",
    "Passed",
    "ResultCollector",
]
