from __future__ import annotations

from pathlib import Path
from typing import Iterable

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from cheatguard.results import CheckResult


def write_junit(
    path: Path, suite_name: str, checks: Iterable[tuple[str, CheckResult]]
) -> Path:
    """Write recorded checks as one JUnit test suite, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for name, result in checks:
        case = TestCase(name)
        case.classname = suite_name
        if not result.passed:
            case.result = Failure(
                f"expected: {result.expected}; actual: {result.actual}"
            )
        suite.add_testcase(case)

    # Use append (not +=) to preserve suite attributes
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
