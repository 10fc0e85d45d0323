import logging

from unravel.models.schemas import DecodeOutcome
from unravel.services.checkers.base import Checker
from unravel.services.decoders.base import Decoder
from unravel.services.decoders.registry import DecoderRegistry

logger = logging.getLogger(__name__)


@DecoderRegistry.register
class ReverseDecoder(Decoder):
    """Reverses a string. stac -> cats"""

    name = "Reverse"
    description = "Reverses a string. stac -> cats"
    link = "http://string-functions.com/reverse.aspx"
    tags = frozenset({"reverse", "decoder"})
    # Reversed strings are rare in the wild
    popularity = 0.2

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        logger.debug("Running reverse string")
        # Palindromes are still accepted; only empty input has nothing to reverse
        if not text:
            return DecodeOutcome.no_result(self, text)

        reversed_text = text[::-1]
        verdict = checker.check(reversed_text)
        return DecodeOutcome.from_check(self, text, [reversed_text], verdict)
