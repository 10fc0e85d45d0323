import base64
import binascii
import re
from typing import ClassVar

from unravel.services.decoders.base import TransformDecoder
from unravel.services.decoders.registry import DecoderRegistry


@DecoderRegistry.register
class Base64URLDecoder(TransformDecoder):
    """
    URL-safe Base64 decoder (RFC 4648 section 5).

    Uses ``-`` and ``_`` where standard Base64 uses ``+`` and ``/``, so
    standard Base64 containing either of those is rejected. Trailing padding
    is optional.
    """

    name = "base64_url"
    description = (
        "Modified Base64 for URL variants exist (such as base64url in RFC 4648), "
        "where the '+' and '/' characters of standard Base64 are respectively "
        "replaced by '-' and '_'."
    )
    link = "https://en.wikipedia.org/wiki/Base64#URL_applications"
    tags = frozenset({"base64_url", "base64", "url", "decoder", "base"})
    popularity = 0.9

    ALPHABET_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]*={0,2}")

    def decode(self, text: str) -> str | None:
        if not self.ALPHABET_PATTERN.fullmatch(text):
            return None

        body = text.rstrip("=")
        # A single trailing character can never encode a full byte
        if len(body) % 4 == 1:
            return None
        padded = body + "=" * (-len(body) % 4)

        try:
            return base64.urlsafe_b64decode(padded).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
