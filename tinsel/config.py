"""Simple configuration loader for tinsel."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Defaults applied to path-finders built from configuration."""

    algorithm: str = "astar"
    max_expansions: Optional[int] = None
    timeout_seconds: Optional[float] = None


@dataclass
class RunnerConfig:
    """Where solutions and their inputs live and how to benchmark them."""

    inputs_dir: str = "inputs"
    solutions_dir: str = "solutions"
    benchmark_iterations: int = 10


@dataclass
class LoggingConfig:
    """Log levels for the root logger and individual modules."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    runner: RunnerConfig
    logging: LoggingConfig


def _optional(value: Any, kind: type) -> Any:
    return None if value is None else kind(value)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    search = SearchConfig(
        algorithm=str(search_data.get("algorithm", "astar")).lower(),
        max_expansions=_optional(search_data.get("max_expansions"), int),
        timeout_seconds=_optional(search_data.get("timeout_seconds"), float),
    )
    if search.max_expansions is not None and search.max_expansions <= 0:
        raise ValueError("search.max_expansions must be positive")
    if search.timeout_seconds is not None and search.timeout_seconds <= 0:
        raise ValueError("search.timeout_seconds must be positive")

    runner_data = data.get("runner") or {}
    runner = RunnerConfig(
        inputs_dir=str(runner_data.get("inputs_dir", "inputs")),
        solutions_dir=str(runner_data.get("solutions_dir", "solutions")),
        benchmark_iterations=int(runner_data.get("benchmark_iterations", 10)),
    )
    if runner.benchmark_iterations <= 0:
        raise ValueError("runner.benchmark_iterations must be positive")

    logging_data = data.get("logging") or {}
    log = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, runner=runner, logging=log)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "RunnerConfig",
    "LoggingConfig",
    "load_config",
]
