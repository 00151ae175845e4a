"""Entry helper that wires configuration, logging and the runner together."""

from pathlib import Path
from typing import Optional, Sequence, Union

from .config import RunnerConfig, load_config
from .host import Host
from .reporting.json_reporter import Report
from .runner.executor import TestRunner
from .suite.schema import TestScope
from .utils.logging_config import setup_logging


async def run_tests(
    host: Host,
    test_suites: Sequence[TestScope],
    config: Optional[RunnerConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    send_report: Optional[bool] = None,
    start_delay: Optional[float] = None,
) -> Report:
    """Run ``test_suites`` against ``host`` and return the report.

    Args:
        host: Host component under test.
        test_suites: Suites to run, in order.
        config: Runner configuration. Takes precedence over ``config_path``.
        config_path: YAML file to load the configuration from.
        send_report: Deprecated reporting toggle, see TestRunner.
        start_delay: Seconds to wait before the first case.

    Raises:
        FileNotFoundError: If ``config_path`` doesn't exist.
        ValueError: If ``config_path`` holds an invalid configuration.
    """
    if config is None:
        config = load_config(config_path) if config_path else RunnerConfig()

    setup_logging(config.log_level)

    runner = TestRunner(
        host,
        test_suites,
        start_delay=start_delay,
        send_report=send_report,
        config=config,
    )
    return await runner.run()
