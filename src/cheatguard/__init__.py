"""Cheat-aware assertions for verifying installers and similar procedures."""

import logging

from cheatguard.formatting import format_cheats, format_check_failure, format_report
from cheatguard.guard import CheatGuardedFailure, cheat_bail, cheat_check, cheat_ensure
from cheatguard.markers import cheat_aware, cheat_canary, cheat_reviewed, guard_metadata
from cheatguard.metadata import AssertionMetadata, Severity
from cheatguard.results import CheckResult, Fail, Pass, ResultAggregator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AssertionMetadata",
    "CheatGuardedFailure",
    "CheckResult",
    "Fail",
    "Pass",
    "ResultAggregator",
    "Severity",
    "cheat_aware",
    "cheat_bail",
    "cheat_canary",
    "cheat_check",
    "cheat_ensure",
    "cheat_reviewed",
    "format_cheats",
    "format_check_failure",
    "format_report",
    "guard_metadata",
]
