from unravel.services.decoders.base import TransformDecoder
from unravel.services.decoders.registry import DecoderRegistry

# ZeroMQ Z85 alphabet (RFC 32/Z85)
ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ".-:+=^!/*?&<>()[]{}@%$#"
)
DECODE_TABLE = {c: i for i, c in enumerate(ALPHABET)}


def z85decode(text: str) -> bytes | None:
    """
    Decode Z85.

    Every 5 characters become 4 big-endian bytes. Returns None when the
    length is not a multiple of 5, a character is outside the alphabet or a
    group overflows 32 bits.
    """
    if len(text) % 5 != 0:
        return None

    out = bytearray()
    for start in range(0, len(text), 5):
        value = 0
        for char in text[start:start + 5]:
            if char not in DECODE_TABLE:
                return None
            value = value * 85 + DECODE_TABLE[char]
        if value > 0xFFFFFFFF:
            return None
        out.extend(value.to_bytes(4, "big"))

    return bytes(out)


@DecoderRegistry.register
class Z85Decoder(TransformDecoder):
    """Z85 decoder, the Base85 variant designed to be safe in source code."""

    name = "Z85"
    description = (
        "Ascii85, also called Base85, is a form of binary-to-text encoding that "
        "uses five ASCII characters to represent four bytes of binary data. "
        "Z85 is a variant designed to be safe in source code."
    )
    link = "https://rfc.zeromq.org/spec/32/"
    tags = frozenset({"z85", "decoder", "base85"})
    popularity = 0.6

    def decode(self, text: str) -> str | None:
        decoded = z85decode(text)
        if decoded is None:
            return None
        try:
            return decoded.decode("utf-8")
        except UnicodeDecodeError:
            return None
