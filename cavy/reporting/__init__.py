"""Reporting module - report model and cavy-cli delivery."""

from .collector import CollectorReporter
from .json_reporter import JsonReporter, Report, TestResult

__all__ = [
    "CollectorReporter",
    "JsonReporter",
    "Report",
    "TestResult",
]
