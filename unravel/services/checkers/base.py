from abc import ABC, abstractmethod

from unravel.models.schemas import CheckResult


class Checker(ABC):
    """
    Abstract base class for plausibility checkers.

    A checker answers one question: does this string look like meaningful
    plaintext? Implementations must be stateless after construction so a
    single instance can be shared by every worker thread.
    """

    # Checker metadata
    name: str
    description: str
    link: str = ""

    @abstractmethod
    def check(self, text: str) -> CheckResult:
        """
        Classify a candidate plaintext.

        Args:
            text: The decoded candidate

        Returns:
            CheckResult with ``is_identified`` set when the text is plausible
        """
        pass

    def _result(self, text: str, identified: bool, description: str = "") -> CheckResult:
        return CheckResult(
            is_identified=identified,
            text=text,
            checker_name=self.name,
            checker_description=self.description,
            description=description,
            link=self.link,
        )
