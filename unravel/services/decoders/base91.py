import base91

from unravel.services.decoders.base import TransformDecoder
from unravel.services.decoders.registry import DecoderRegistry


@DecoderRegistry.register
class Base91Decoder(TransformDecoder):
    """
    basE91 decoder.

    Almost any printable ASCII string is valid basE91, so this decoder
    produces output for a lot of inputs; the checker does the real work.
    Invalid UTF-8 in the decoded bytes is replaced rather than rejected.
    """

    name = "base91"
    description = (
        "basE91 is an advanced method for encoding binary data as ASCII "
        "characters. It is similar to UUencode or base64, but is more efficient."
    )
    link = "https://base91.sourceforge.net/"
    tags = frozenset({"base91", "decoder", "base"})
    popularity = 0.3
    expected_success = 0.7

    def decode(self, text: str) -> str | None:
        # base91.decode silently skips characters outside its alphabet
        if any(char not in base91.decode_table for char in text):
            return None
        return bytes(base91.decode(text)).decode("utf-8", errors="replace")
