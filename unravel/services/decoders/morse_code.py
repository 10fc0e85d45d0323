from unravel.services.decoders.base import TransformDecoder
from unravel.services.decoders.registry import DecoderRegistry
from unravel.services.storage import MORSE_CODE_TABLE


@DecoderRegistry.register
class MorseCodeDecoder(TransformDecoder):
    """
    Morse code decoder.

    Letters are separated by single spaces. A ``/`` token or an empty token
    (two spaces in a row) stands for a space between words. One unknown
    token fails the whole decode.
    """

    name = "Morse Code"
    description = (
        "Morse code is a method used in telecommunication to encode text "
        "characters as standardized sequences of two different signal "
        "durations, called dots and dashes."
    )
    link = "https://en.wikipedia.org/wiki/Morse_code"
    tags = frozenset({"morseCode", "decoder", "signals"})
    popularity = 0.5

    def decode(self, text: str) -> str | None:
        decoded = []
        for token in text.split(" "):
            char = MORSE_CODE_TABLE.get(token)
            if char is None:
                return None
            decoded.append(char)
        return "".join(decoded)
