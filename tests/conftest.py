"""Shared fixtures for the test suite."""

import pytest

from unravel.models.schemas import CheckResult
from unravel.services.checkers import Checker, CombinedChecker


class StaticChecker(Checker):
    """Checker returning the same verdict for everything, recording its inputs."""

    name = "Static Checker"
    description = "Always gives the same verdict."

    def __init__(self, verdict: bool):
        self.verdict = verdict
        self.seen: list[str] = []

    def check(self, text: str) -> CheckResult:
        self.seen.append(text)
        return self._result(text, self.verdict)


@pytest.fixture
def accept_all():
    return StaticChecker(True)


@pytest.fixture
def reject_all():
    return StaticChecker(False)


@pytest.fixture
def combined_checker():
    return CombinedChecker()
