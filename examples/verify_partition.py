#!/usr/bin/env python3
"""Verify sfdisk output with cheat-guarded checks from the example catalog."""

import sys
from pathlib import Path

from cheatguard import CheatGuardedFailure, cheat_check, cheat_ensure
from cheatguard.catalog import load_catalog


class StepResult:
    def __init__(self, name):
        self.name = name
        self.checks = []

    def add_check(self, name, result):
        self.checks.append((name, result))

    def passed(self):
        return all(result.passed for _, result in self.checks)


def main():
    catalog = load_catalog(Path(__file__).parent / "install-guards.yaml")
    output = sys.stdin.read()

    step = StepResult("Partition Disk")
    cheat_check(
        step,
        name="Partition table created",
        condition="vda1" in output,
        expected="Partition vda1 exists",
        actual=f"sfdisk output: {output}",
        **catalog.get("partition-table").fields(),
    )

    try:
        cheat_ensure(
            step.passed(),
            f"{step.name}: {len(step.checks)} check(s) recorded, not all passed",
            **catalog.get("partition-table").fields(),
        )
    except CheatGuardedFailure as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
