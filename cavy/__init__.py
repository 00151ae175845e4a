"""cavy - sequential in-process test runner with cavy-cli reporting."""

from .config import ReportMode, RunnerConfig, load_config
from .host import Host
from .reporting import CollectorReporter, Report, TestResult
from .runner import CaseState, Failed, Passed, TestRunner
from .suite import TestCase, TestScope
from .tester import run_tests

__version__ = "0.1.0"

__all__ = [
    "CaseState",
    "CollectorReporter",
    "Failed",
    "Host",
    "Passed",
    "Report",
    "ReportMode",
    "RunnerConfig",
    "TestCase",
    "TestResult",
    "TestRunner",
    "TestScope",
    "load_config",
    "run_tests",
]
