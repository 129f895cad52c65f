"""Discover solution classes in a directory of modules."""

from __future__ import annotations

import hashlib
import inspect
import logging
import sys
from importlib.machinery import SourceFileLoader
from importlib.util import module_from_spec, spec_from_loader
from pathlib import Path
from types import ModuleType
from typing import Dict, Optional, Tuple, Type

from ..config import CONFIG, RunnerConfig
from .base import Solution

logger = logging.getLogger(__name__)


def _module_name(path: Path) -> str:
    """Return a unique module name for ``path``."""
    stem = "".join(c if c.isalnum() else "_" for c in path.stem)
    digest = hashlib.md5(str(path.resolve()).encode()).hexdigest()[:8]
    return f"tinsel_solution_{stem}_{digest}"


def _load_module(path: Path) -> Optional[ModuleType]:
    loader = SourceFileLoader(_module_name(path), str(path))
    spec = spec_from_loader(loader.name, loader)
    if spec is None:
        logger.error("Could not create spec for module %s", path)
        return None
    module = module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(spec.name, None)
        logger.error("Error loading solution module %s: %s", path, exc, exc_info=True)
        return None
    return module


def _module_solutions(module: ModuleType) -> Dict[Tuple[int, int], Type[Solution]]:
    found: Dict[Tuple[int, int], Type[Solution]] = {}
    for name, obj in module.__dict__.items():
        if not (inspect.isclass(obj) and issubclass(obj, Solution) and obj is not Solution):
            continue
        # Imported or undecorated classes carry no registration of their own.
        if obj.__module__ != module.__name__ or "info" not in obj.__dict__:
            logger.debug("Skipping %s in %s: not a registered solution", name, module.__name__)
            continue
        found[obj.info.key] = obj
    return found


def discover(
    directory: Optional[str | Path] = None,
    config: Optional[RunnerConfig] = None,
) -> Dict[Tuple[int, int], Type[Solution]]:
    """Load every module under ``directory`` and return its solutions.

    Without ``directory`` the ``solutions_dir`` of ``config`` (or of the
    loaded runner configuration) is searched.

    Modules that fail to import are logged and skipped. Results are keyed by
    ``(year, day)``; later files win when two solve the same day.
    """

    if directory is None:
        directory = (config or CONFIG.runner).solutions_dir
    root = Path(directory)
    solutions: Dict[Tuple[int, int], Type[Solution]] = {}
    if not root.is_dir():
        logger.warning("Solution directory %s does not exist", root)
        return solutions

    for path in sorted(root.rglob("*.py")):
        if path.name == "__init__.py":
            continue
        module = _load_module(path)
        if module is None:
            continue
        for key, cls in _module_solutions(module).items():
            if key in solutions:
                logger.warning(
                    "Solution %s from %s overrides %s for %d day %d",
                    cls.__name__, path, solutions[key].__name__, *key,
                )
            solutions[key] = cls
            logger.info("Registered solution '%s' for %d day %d", cls.info.name, *key)
    return solutions


__all__ = ["discover"]
