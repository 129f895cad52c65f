"""Configuration bootstrap and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import CONFIG_PATH, Config, LoggingConfig, load_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level.upper(), None)
    valid = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )
    if not valid:
        logger.warning("Invalid global log level '%s' in config; using INFO.", cfg.global_level)

    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> Config:
    """Load configuration from ``config_path`` and configure logging."""

    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)
    logger.info(
        "[Bootstrap] Search algorithm %s, solutions in %s",
        cfg.search.algorithm, cfg.runner.solutions_dir,
    )
    return cfg


__all__ = ["LOG_FORMAT", "bootstrap", "configure_logging"]
