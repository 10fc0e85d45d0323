import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from unravel.models.schemas import DecodeOutcome, DecoderMetadata
from unravel.services.checkers.base import Checker

logger = logging.getLogger(__name__)


def check_string_success(decoded: str, original: str) -> bool:
    """
    Reject decodes that are indistinguishable from doing nothing.

    A decode fails when it produced nothing, gave back the input unchanged,
    or only changed whitespace around the input.
    """
    if not decoded:
        return False
    if decoded == original:
        return False
    if decoded.strip() == original.strip():
        return False
    return True


class Decoder(ABC):
    """
    Abstract base class for all decoders.

    Each decoder reverses one specific encoding. Subclasses provide:
    - crack(): decode, guard against no-op output and check the result
    - metadata class attributes describing the encoding

    Instances hold no mutable state and are shared between threads.
    """

    # Decoder metadata
    name: ClassVar[str]
    description: ClassVar[str]
    link: ClassVar[str] = ""
    tags: ClassVar[frozenset[str]] = frozenset()
    popularity: ClassVar[float] = 0.5
    # Advisory cost estimates in seconds
    expected_runtime: ClassVar[float] = 0.01
    failure_runtime: ClassVar[float] = 0.01
    expected_success: ClassVar[float] = 1.0
    # Shannon entropy band typical of valid input, advisory
    normalised_entropy: ClassVar[tuple[float, float]] = (1.0, 10.0)

    @property
    def metadata(self) -> DecoderMetadata:
        """Static metadata, available without running the decoder."""
        return DecoderMetadata(
            name=self.name,
            description=self.description,
            link=self.link,
            tags=self.tags,
            popularity=self.popularity,
            expected_runtime=self.expected_runtime,
            failure_runtime=self.failure_runtime,
            expected_success=self.expected_success,
            normalised_entropy=self.normalised_entropy,
        )

    def get_name(self) -> str:
        return self.name

    def get_tags(self) -> frozenset[str]:
        return self.tags

    def attempt(self, text: str, checker: Checker) -> DecodeOutcome:
        """
        Try to decode the text and verify the result.

        Never raises: any fault inside the decoder becomes a no-result
        outcome for this decoder only.

        Args:
            text: Arbitrary input, possibly empty or non-ASCII
            checker: Checker deciding whether a decode is plausible

        Returns:
            DecodeOutcome for this attempt
        """
        try:
            return self.crack(text, checker)
        except Exception:
            logger.warning("Decoder %s failed on %r", self.name, text, exc_info=True)
            return DecodeOutcome.no_result(self, text)

    @abstractmethod
    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        """
        Decode the text and verify the result.

        Args:
            text: The encoded text
            checker: Checker deciding whether a decode is plausible

        Returns:
            DecodeOutcome for this attempt
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class TransformDecoder(Decoder):
    """
    Decoder applying one deterministic reverse mapping.

    Subclasses only implement decode(); malformed input is reported by
    returning None rather than raising.
    """

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        """Decode once, guard against no-op output, then check."""
        logger.debug("Trying %s with text %r", self.name, text)
        decoded = self.decode(text)

        if decoded is None:
            logger.debug("Failed to decode %s: input is not valid for this encoding", self.name)
            return DecodeOutcome.no_result(self, text)

        if not check_string_success(decoded, text):
            logger.info(
                "Failed to decode %s: output %r was not meaningfully different from the input",
                self.name,
                decoded,
            )
            return DecodeOutcome.no_result(self, text)

        verdict = checker.check(decoded)
        return DecodeOutcome.from_check(self, text, [decoded], verdict)

    @abstractmethod
    def decode(self, text: str) -> str | None:
        """
        Apply the raw reverse transform.

        Args:
            text: The encoded text

        Returns:
            Decoded text, or None if the input is malformed for this encoding
        """
        pass
