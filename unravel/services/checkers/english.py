import logging
import string

from unravel.core.config import get_settings
from unravel.models.schemas import CheckResult
from unravel.services.checkers.base import Checker
from unravel.services.storage import get_dictionary

logger = logging.getLogger(__name__)


class EnglishChecker(Checker):
    """
    Dictionary based natural-language checker.

    Splits the text on whitespace, trims punctuation around each token and
    looks the lowercased token up in the bundled ``english`` corpus. The
    text is plausible when at least ``threshold`` of its tokens are known
    words and one of them is longer than a single letter.
    """

    name = "English Checker"
    description = "Checks whether enough words of the text appear in an English dictionary."
    link = "https://en.wikipedia.org/wiki/Most_common_words_in_English"

    CORPUS = "english"

    def __init__(self, threshold: float | None = None):
        if threshold is None:
            threshold = get_settings().english_word_ratio
        self.threshold = threshold
        self.words = get_dictionary(self.CORPUS)

    def check(self, text: str) -> CheckResult:
        tokens = self._tokens(text)
        if not tokens:
            return self._result(text, False)

        hits = [token for token in tokens if token in self.words]
        found = len(hits)
        ratio = found / len(tokens)

        # A lone "a" or "i" is not enough
        if any(len(hit) > 1 for hit in hits) and ratio >= self.threshold:
            logger.debug("%d of %d tokens are English words", found, len(tokens))
            return self._result(
                text,
                True,
                f"{found} of {len(tokens)} words found in the {self.CORPUS} dictionary",
            )

        return self._result(text, False)

    def _tokens(self, text: str) -> list[str]:
        """Normalise whitespace-delimited tokens, dropping punctuation-only ones."""
        tokens = []
        for raw in text.split():
            token = raw.strip(string.punctuation).lower()
            if token:
                tokens.append(token)
        return tokens
