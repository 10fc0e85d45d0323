import base64

from unravel.services.decoders.base import TransformDecoder
from unravel.services.decoders.registry import DecoderRegistry


@DecoderRegistry.register
class Base64Decoder(TransformDecoder):
    """Standard Base64 decoder (RFC 4648 section 4) with strict validation."""

    name = "base64"
    description = (
        "Base64 is a group of binary-to-text encoding schemes that represent "
        "binary data in an ASCII string format by translating the data into "
        "a radix-64 representation."
    )
    link = "https://en.wikipedia.org/wiki/Base64"
    tags = frozenset({"base64", "decoder", "base"})
    popularity = 1.0

    def decode(self, text: str) -> str | None:
        try:
            return base64.b64decode(text, validate=True).decode("utf-8")
        except ValueError:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            return None
