"""Cheat-guarded assertions: bail, ensure and check."""

from __future__ import annotations

import logging
import sys
from typing import Any, Sequence, TextIO

from cheatguard.formatting import format_check_failure, render_report
from cheatguard.metadata import AssertionMetadata, Severity
from cheatguard.results import Fail, Pass, ResultAggregator

logger = logging.getLogger(__name__)


class CheatGuardedFailure(Exception):
    """A failed check whose message documents how it could have been cheated.

    ``str(exc)`` is the full formatted report.
    """

    def __init__(self, error_message: str, metadata: AssertionMetadata):
        self.error_message = error_message
        self.metadata = metadata
        self.report = render_report(error_message, metadata)
        super().__init__(self.report)

    def __reduce__(self):
        return (self.__class__, (self.error_message, self.metadata))


def cheat_bail(
    message: str,
    *,
    protects: str,
    severity: Severity | str,
    cheats: Sequence[str],
    consequence: str,
) -> None:
    """Abort with a CheatGuardedFailure.

    Like a bare ``raise``, but the error carries what the check protects,
    its severity, the numbered cheat vectors and the user consequence.

    Example:
        if "vda1" not in output:
            cheat_bail(
                "Partition vda1 not found after sfdisk",
                protects="Disk is partitioned correctly",
                severity="CRITICAL",
                cheats=["Accept exit code without verification", "Skip partition check"],
                consequence="No partitions, installation fails silently",
            )
    """
    metadata = AssertionMetadata(
        protects=protects,
        severity=severity,
        cheats=cheats,
        consequence=consequence,
    )
    logger.warning(
        f"Cheat-guarded failure ({metadata.severity.value}): {message} "
        f"[protects: {metadata.protects}]"
    )
    raise CheatGuardedFailure(message, metadata)


def cheat_ensure(
    condition: Any,
    message: str,
    *,
    protects: str,
    severity: Severity | str,
    cheats: Sequence[str],
    consequence: str,
) -> None:
    """Call cheat_bail with the same arguments unless ``condition`` holds."""
    if not condition:
        cheat_bail(
            message,
            protects=protects,
            severity=severity,
            cheats=cheats,
            consequence=consequence,
        )


def cheat_check(
    result: ResultAggregator,
    *,
    name: str,
    condition: Any,
    protects: str,
    severity: Severity | str,
    cheats: Sequence[str],
    consequence: str,
    expected: Any,
    actual: Any,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Evaluate a check and record its outcome on ``result`` without raising.

    A progress line naming the check and what it protects is always written
    to ``out`` (stdout by default). On failure the cheat documentation is
    written to ``err`` (stderr by default) and a Fail is recorded; on success
    a Pass is recorded. The caller decides afterwards whether the collected
    outcomes amount to a failed step.
    """
    metadata = AssertionMetadata(
        protects=protects,
        severity=severity,
        cheats=cheats,
        consequence=consequence,
    )
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    print(f"    checking: {name} (protects: {metadata.protects})", file=out)

    if condition:
        logger.debug(f"Check '{name}' passed")
        result.add_check(name, Pass(str(expected)))
        return

    logger.warning(f"Check '{name}' failed ({metadata.severity.value})")
    print(format_check_failure(name, metadata), file=err)
    result.add_check(name, Fail(str(expected), str(actual)))
