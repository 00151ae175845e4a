"""Test runner - executes suites against a live host.

Runs every case of every suite one after the other:
1. Wait for the optional start delay
2. For each case: clear host state, run before_each, re-render, run the body
3. Record a pass/fail result per case
4. Build the report
5. Hand the report to the collector reporter

Nothing here runs concurrently and there is no cancellation: once started,
a run goes to completion, so a hung body or hook stalls it.
"""

import asyncio
import logging
import time
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

from ..config import ReportMode, RunnerConfig
from ..host import Host, maybe_await
from ..reporting.collector import CollectorReporter
from ..reporting.json_reporter import JsonReporter, Report, TestResult
from ..suite.schema import TestCase, TestScope
from .result_collector import Failed, Outcome, Passed, ResultCollector

logger = logging.getLogger(__name__)

DEPRECATION_MESSAGE = (
    "Deprecation warning: using the `send_report` option is deprecated. "
    "By default, cavy now checks whether the cavy-cli server is running "
    "and sends a report if a connection is detected."
)


class CaseState(str, Enum):
    """Lifecycle of a single test case."""
    PENDING = "pending"
    ISOLATING = "isolating"
    SETTING_UP = "setting_up"
    RENDERING = "rendering"
    EXECUTING = "executing"
    PASSED = "passed"
    FAILED = "failed"


class TestRunner:
    """Runs test suites in order against a host and reports the results."""

    __test__ = False

    def __init__(
        self,
        host: Host,
        test_suites: Sequence[TestScope],
        start_delay: Optional[float] = None,
        send_report: Optional[bool] = None,
        config: Optional[RunnerConfig] = None,
        reporter: Optional[CollectorReporter] = None,
    ):
        """Initialize test runner.

        Args:
            host: Host component the tests mutate.
            test_suites: Suites to run, in order.
            start_delay: Seconds to wait before the first case. Overrides
                ``config.start_delay`` when given.
            send_report: Deprecated. True/False force reporting on/off;
                overrides ``config.report_mode`` when given.
            config: Runner configuration.
            reporter: Collector reporter (built from ``config`` when omitted).
        """
        self.host = host
        self.test_suites = list(test_suites)
        self.config = config or RunnerConfig()
        self.start_delay = self.config.start_delay if start_delay is None else start_delay
        if send_report is None:
            self.report_mode = self.config.report_mode
        else:
            self.report_mode = ReportMode.from_legacy(send_report)
        self._legacy_toggle = send_report is not None
        self.reporter = reporter or CollectorReporter(config=self.config)
        self.collector = ResultCollector()
        self.current_state = CaseState.PENDING
        self._json_reporter = JsonReporter()

    @property
    def test_results(self) -> list[TestResult]:
        return self.collector.results

    @property
    def error_count(self) -> int:
        return self.collector.error_count

    async def run(self) -> Report:
        """Start the tests after the optional delay.

        Returns:
            The report of the finished run.
        """
        if self.start_delay:
            await asyncio.sleep(self.start_delay)
        return await self.execute_all()

    async def execute_all(self) -> Report:
        """Run every case of every suite in order, then report."""
        self.collector.reset()

        start = datetime.now()
        start_time = time.perf_counter()
        logger.info("Cavy test suite started at %s.", start.isoformat(sep=" ", timespec="seconds"))

        for scope in self.test_suites:
            for case in scope.test_cases:
                await self.execute_case(scope, case)

        duration = time.perf_counter() - start_time
        stop = datetime.now()
        logger.info(
            "Cavy test suite stopped at %s, duration: %s seconds.",
            stop.isoformat(sep=" ", timespec="seconds"),
            round(duration, 3),
        )

        report = self.collector.build_report(duration)
        if report.all_passed:
            logger.info("All %d tests passed.", report.total_count)
        else:
            logger.warning("%d of %d tests failed.", report.error_count, report.total_count)

        if self.config.save_report:
            self._save_report(report)

        if self._legacy_toggle:
            logger.warning(DEPRECATION_MESSAGE)
        if self.report_mode == ReportMode.FORCE_OFF:
            return report

        await self.reporter.probe_and_send(report)
        return report

    async def execute_case(self, scope: TestScope, case: TestCase) -> TestResult:
        """Run one case with fresh host state and record its result.

        A failure in ``before_each`` is attributed to the case, same as a
        failure in its body. Errors from ``host.clear`` propagate.
        """
        self.current_state = CaseState.ISOLATING
        await maybe_await(self.host.clear())

        scope.host = self.host
        outcome = await self._attempt(scope, case)

        result = self.collector.record(case.description, outcome)
        if result.passed:
            self.current_state = CaseState.PASSED
            logger.info(result.message)
        else:
            self.current_state = CaseState.FAILED
            logger.warning(result.message)
        return result

    async def _attempt(self, scope: TestScope, case: TestCase) -> Outcome:
        """Run hook, render and body as a single attempt."""
        try:
            if scope.before_each is not None:
                self.current_state = CaseState.SETTING_UP
                await maybe_await(scope.before_each(scope))

            self.current_state = CaseState.RENDERING
            await maybe_await(self.host.re_render())

            self.current_state = CaseState.EXECUTING
            await maybe_await(case.body(scope))
        except Exception as e:
            return Failed.from_exception(e)
        return Passed()

    def _save_report(self, report: Report) -> None:
        """Write the report to disk; failures only warn."""
        try:
            path = self._json_reporter.default_path(self.config.report_dir)
            saved_path = self._json_reporter.save(report, path)
            logger.info("Report saved: %s", saved_path)
        except OSError as e:
            logger.warning("Failed to save report: %s", e)
