"""Runner configuration for cavy.

Holds the settings a run needs and loads them from an optional YAML file:

    start_delay: 1.5
    report_mode: auto
    collector_url: http://127.0.0.1:8082
    save_report: true
    report_dir: reports
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml

DEFAULT_COLLECTOR_URL = "http://127.0.0.1:8082"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ReportMode(str, Enum):
    """When a finished run is reported to cavy-cli."""
    AUTO = "auto"
    FORCE_ON = "force_on"
    FORCE_OFF = "force_off"

    @classmethod
    def from_legacy(cls, send_report: Optional[bool]) -> "ReportMode":
        """Map the deprecated ``send_report`` flag onto a mode."""
        if send_report is None:
            return cls.AUTO
        return cls.FORCE_ON if send_report else cls.FORCE_OFF


VALID_REPORT_MODES = {m.value for m in ReportMode}


@dataclass
class RunnerConfig:
    """Configuration for a test run."""
    start_delay: float = 0.0
    report_mode: ReportMode = ReportMode.AUTO
    collector_url: str = DEFAULT_COLLECTOR_URL
    probe_timeout: float = 2.0
    send_timeout: float = 10.0
    save_report: bool = False
    report_dir: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.report_mode = ReportMode(self.report_mode)
        self.collector_url = self.collector_url.rstrip("/")
        self.log_level = self.log_level.upper()
        if self.report_dir is not None:
            self.report_dir = Path(self.report_dir)


def load_config(file_path: Union[str, Path]) -> RunnerConfig:
    """Load a RunnerConfig from a YAML file.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed RunnerConfig.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is empty, malformed or holds invalid values.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Empty config file: {file_path}")

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: Any, source: str = "<inline>") -> RunnerConfig:
    """Build a RunnerConfig from an already-loaded mapping.

    Unknown keys and null values are ignored.

    Raises:
        ValueError: If the data is not a mapping or holds invalid values.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    values = {
        k: v for k, v in data.items()
        if k in RunnerConfig.__dataclass_fields__ and v is not None
    }

    for name in ("start_delay", "probe_timeout", "send_timeout"):
        if name in values:
            value = values[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"'{name}' must be a number in {source}")
            if value < 0:
                raise ValueError(f"'{name}' must not be negative in {source}")
            values[name] = float(value)

    if "save_report" in values and not isinstance(values["save_report"], bool):
        raise ValueError(f"'save_report' must be true or false in {source}")

    mode = values.get("report_mode")
    if mode is not None and str(mode).lower() not in VALID_REPORT_MODES:
        raise ValueError(
            f"Invalid report_mode '{mode}' in {source}. "
            f"Must be one of: {', '.join(sorted(VALID_REPORT_MODES))}"
        )
    if mode is not None:
        values["report_mode"] = str(mode).lower()

    level = values.get("log_level")
    if level is not None and str(level).upper() not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log_level '{level}' in {source}. "
            f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    if "collector_url" in values:
        url = values["collector_url"]
        if not isinstance(url, str) or not url.startswith(("http://", "https://")):
            raise ValueError(f"'collector_url' must be an http(s) URL in {source}")

    return RunnerConfig(**values)
