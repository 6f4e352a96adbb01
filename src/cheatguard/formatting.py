"""Rendering of cheat-guarded failure reports."""

from __future__ import annotations

from typing import Sequence

from cheatguard.metadata import AssertionMetadata, Severity

BORDER = "=" * 70
CHECK_BORDER = "=" * 60


def format_cheats(cheats: Sequence[str]) -> str:
    """Number cheat vectors 1..N in the order given."""
    return "\n".join(f"  {i + 1}. {cheat}" for i, cheat in enumerate(cheats))


def format_report(
    error_message: str,
    protects: str,
    severity: Severity | str,
    cheats: Sequence[str],
    consequence: str,
) -> str:
    """Render the report carried by a CheatGuardedFailure.

    The output depends only on the five arguments, so identical calls give
    byte-identical text.
    """
    metadata = AssertionMetadata(
        protects=protects,
        severity=severity,
        cheats=cheats,
        consequence=consequence,
    )
    return render_report(error_message, metadata)


def render_report(error_message: str, metadata: AssertionMetadata) -> str:
    return (
        f"\n{BORDER}\n"
        "=== CHEAT-GUARDED FAILURE ===\n"
        f"{BORDER}\n\n"
        f"PROTECTS: {metadata.protects}\n"
        f"SEVERITY: {metadata.severity.value}\n\n"
        "CHEAT VECTORS:\n"
        f"{format_cheats(metadata.cheats)}\n\n"
        "USER CONSEQUENCE:\n"
        f"{metadata.consequence}\n\n"
        "ERROR:\n"
        f"{error_message}\n"
        f"{BORDER}\n"
    )


def format_check_failure(name: str, metadata: AssertionMetadata) -> str:
    """Render the diagnostic block printed when a recorded check fails."""
    lines = [
        "",
        CHECK_BORDER,
        f"CHEAT-GUARDED CHECK FAILED: {name}",
        CHECK_BORDER,
        f"PROTECTS: {metadata.protects}",
        f"SEVERITY: {metadata.severity.value}",
        "CHEATS:",
        format_cheats(metadata.cheats),
        f"CONSEQUENCE: {metadata.consequence}",
        CHECK_BORDER,
    ]
    return "\n".join(lines)
