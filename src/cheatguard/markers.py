"""Declarative markers for verification functions.

The decorators only attach attributes; the decorated function is returned
unchanged and behaves exactly as before.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

from cheatguard.metadata import AssertionMetadata, Severity

F = TypeVar("F", bound=Callable)


@dataclass(frozen=True)
class CanaryInfo:
    bait: str
    tripwire: str


@dataclass(frozen=True)
class ReviewInfo:
    reviewer: str
    note: str


def cheat_aware(
    *,
    protects: str,
    severity: Severity | str,
    cheats: Sequence[str],
    consequence: str,
) -> Callable[[F], F]:
    """Document the cheat vectors of a whole verification function."""
    metadata = AssertionMetadata(
        protects=protects,
        severity=severity,
        cheats=cheats,
        consequence=consequence,
    )

    def decorator(fn: F) -> F:
        fn.__cheat_guard__ = metadata
        return fn

    return decorator


def cheat_canary(*, bait: str, tripwire: str) -> Callable[[F], F]:
    """Mark a function that contains a deliberately planted weakness.

    ``bait`` describes the weakness, ``tripwire`` what a reviewer or
    tool is expected to notice about it.
    """
    info = CanaryInfo(bait=bait, tripwire=tripwire)

    def decorator(fn: F) -> F:
        fn.__cheat_canary__ = info
        return fn

    return decorator


def cheat_reviewed(*, reviewer: str, note: str) -> Callable[[F], F]:
    """Record that a reviewer has signed off on the function's cheat vectors."""
    info = ReviewInfo(reviewer=reviewer, note=note)

    def decorator(fn: F) -> F:
        fn.__cheat_reviewed__ = info
        return fn

    return decorator


def guard_metadata(fn: Callable) -> AssertionMetadata | None:
    """Return the metadata attached by cheat_aware, or None."""
    return getattr(fn, "__cheat_guard__", None)
