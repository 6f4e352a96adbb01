"""Pytest configuration and fixtures."""

import logging

import pytest

from cheatguard.results import CheckResult


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset the cheatguard logger after each test so handlers do not leak."""
    yield

    logger = logging.getLogger("cheatguard")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


class RecordingAggregator:
    """Minimal stand-in for a step result that keeps every check in order."""

    def __init__(self):
        self.checks: list[tuple[str, CheckResult]] = []

    def add_check(self, name: str, result: CheckResult) -> None:
        self.checks.append((name, result))


@pytest.fixture
def aggregator():
    return RecordingAggregator()


@pytest.fixture
def partition_guard() -> dict:
    return {
        "protects": "Disk is partitioned correctly",
        "severity": "CRITICAL",
        "cheats": ["Accept exit code without verification", "Skip partition check"],
        "consequence": "No partitions, installation fails silently",
    }
