from __future__ import annotations

"""Base interface and registration for puzzle solutions."""

import datetime
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

FIRST_EVENT_YEAR = 2015
LAST_DAY = 25

S = TypeVar("S", bound=Type["Solution"])
C = TypeVar("C")


class SolutionError(Exception):
    """Base error for solution handling."""


class SolutionParseError(SolutionError, ValueError):
    """Raised when a solution cannot parse its raw input."""


@dataclass(frozen=True)
class SolutionInfo:
    """Registration details attached to a solution class."""

    name: str
    year: int
    day: int

    @property
    def key(self) -> Tuple[int, int]:
        return (self.year, self.day)


class SolutionContext:
    """Parsed input handed to each part of a solution."""

    def __init__(self, input: Any) -> None:
        self.input = input

    def as_type(self, cls: Type[C]) -> C:
        """Return :attr:`input` if it is a ``cls``; raise ``TypeError`` otherwise."""

        if not isinstance(self.input, cls):
            raise TypeError(
                f"input is {type(self.input).__name__}, not {cls.__name__}"
            )
        return self.input


class Solution(ABC):
    """Abstract base class for all puzzle solutions."""

    info: SolutionInfo

    @abstractmethod
    def parse(self, raw: str) -> Any:
        """Turn the raw puzzle input into the object both parts work on."""
        raise NotImplementedError

    @abstractmethod
    def part_one(self, context: SolutionContext) -> Any:
        raise NotImplementedError

    @abstractmethod
    def part_two(self, context: SolutionContext) -> Any:
        raise NotImplementedError


# Solutions registered through :func:`solution`, keyed by ``(year, day)``.
REGISTRY: Dict[Tuple[int, int], Type[Solution]] = {}


def _validate(name: str, year: int, day: int) -> None:
    if not name or not name.strip():
        raise ValueError("Name must not be empty.")
    last_year = datetime.date.today().year
    if not FIRST_EVENT_YEAR <= year <= last_year:
        raise ValueError(
            f"Year must be a value between {FIRST_EVENT_YEAR} and {last_year} inclusive."
        )
    if not 1 <= day <= LAST_DAY:
        raise ValueError(f"Day must be a value between 1 and {LAST_DAY} inclusive.")


def solution(name: str, year: int, day: int) -> Callable[[S], S]:
    """Class decorator registering a :class:`Solution` for ``year``/``day``."""

    _validate(name, year, day)
    info = SolutionInfo(name=name.strip(), year=year, day=day)

    def register(cls: S) -> S:
        if not (isinstance(cls, type) and issubclass(cls, Solution)):
            raise TypeError(f"{cls!r} is not a Solution subclass")
        cls.info = info
        existing = REGISTRY.get(info.key)
        if existing is not None and existing is not cls:
            logger.warning(
                "Solution for %d day %d (%s) replaces %s",
                year, day, cls.__name__, existing.__name__,
            )
        REGISTRY[info.key] = cls
        return cls

    return register


def create_context(instance: Solution, raw: str) -> SolutionContext:
    """Parse ``raw`` with ``instance`` and wrap the result."""

    if not raw or not raw.strip():
        raise ValueError("Input must not be empty.")
    try:
        parsed = instance.parse(raw)
    except Exception as exc:
        raise SolutionParseError(
            f"{type(instance).__name__} was unable to parse input: {exc}"
        ) from exc
    return SolutionContext(parsed)


__all__ = [
    "REGISTRY",
    "Solution",
    "SolutionContext",
    "SolutionError",
    "SolutionInfo",
    "SolutionParseError",
    "create_context",
    "solution",
]
