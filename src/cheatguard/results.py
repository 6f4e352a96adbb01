"""Outcomes recorded by cheat_check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class Pass:
    expected: str

    @property
    def passed(self) -> bool:
        return True


@dataclass(frozen=True)
class Fail:
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return False


CheckResult = Union[Pass, Fail]


@runtime_checkable
class ResultAggregator(Protocol):
    """Anything that collects named check outcomes, e.g. a step result.

    Entries with the same name are all kept; ordering and synchronization
    are the aggregator's concern.
    """

    def add_check(self, name: str, result: CheckResult) -> None: ...
