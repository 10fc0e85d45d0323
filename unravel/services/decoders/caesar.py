import logging
import string

from unravel.models.schemas import DecodeOutcome
from unravel.services.checkers.base import Checker
from unravel.services.decoders.base import Decoder, check_string_success
from unravel.services.decoders.registry import DecoderRegistry

logger = logging.getLogger(__name__)


def caesar_shift(text: str, shift: int) -> str:
    """
    Rotate every ASCII letter forward by ``shift`` places.

    Case is preserved and every other character, including non-ASCII
    letters, passes through unchanged. Negative shifts rotate backwards.
    """
    result = []
    for char in text:
        if char in string.ascii_lowercase:
            result.append(chr((ord(char) - ord("a") + shift) % 26 + ord("a")))
        elif char in string.ascii_uppercase:
            result.append(chr((ord(char) - ord("A") + shift) % 26 + ord("A")))
        else:
            result.append(char)
    return "".join(result)


@DecoderRegistry.register
class CaesarDecoder(Decoder):
    """
    Caesar cipher decoder.

    With only 25 meaningful shifts the cipher is broken by trying them all.
    The first shift the checker accepts is returned on its own; if none is
    accepted, all 25 shifts come back unverified so they can be inspected
    by hand or decoded further.
    """

    name = "Caesar Cipher"
    description = (
        "Caesar cipher, also known as the shift cipher, is a substitution cipher "
        "in which each letter in the plaintext is replaced by a letter some fixed "
        "number of positions down the alphabet."
    )
    link = "https://en.wikipedia.org/wiki/Caesar_cipher"
    tags = frozenset({"caesar", "decryption", "classic", "reciprocal"})
    popularity = 1.0

    SHIFTS = range(1, 26)

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        logger.debug("Trying Caesar Cipher with text %r", text)
        candidates: list[str] = []

        for shift in self.SHIFTS:
            decoded = caesar_shift(text, shift)
            if not check_string_success(decoded, text):
                # Nothing to rotate, so no other shift can differ either
                logger.info(
                    "Failed to decode caesar: output %r was not meaningfully different from the input",
                    decoded,
                )
                return DecodeOutcome.no_result(self, text)

            verdict = checker.check(decoded)
            if verdict.is_identified:
                logger.debug("Found a match with caesar shift %d", shift)
                return DecodeOutcome.from_check(self, text, [decoded], verdict)
            candidates.append(decoded)

        return DecodeOutcome.from_check(self, text, candidates, None)
