from collections.abc import Sequence

from unravel.models.schemas import CheckResult
from unravel.services.checkers.base import Checker
from unravel.services.checkers.english import EnglishChecker
from unravel.services.checkers.pattern import PatternChecker


class CombinedChecker(Checker):
    """
    Runs several checkers in a fixed priority order.

    The first positive verdict wins and later checkers are not consulted.
    The default order puts the cheap, highly specific pattern checker before
    the dictionary checker: short structured tokens (IPs, e-mails) are more
    common than prose in what people paste.
    """

    name = "Combined Checker"
    description = "Tries each checker in priority order and returns the first positive verdict."

    def __init__(self, checkers: Sequence[Checker] | None = None):
        if checkers is None:
            checkers = (PatternChecker(), EnglishChecker())
        self.checkers: tuple[Checker, ...] = tuple(checkers)

    def check(self, text: str) -> CheckResult:
        for checker in self.checkers:
            result = checker.check(text)
            if result.is_identified:
                return result

        return self._result(text, False)
