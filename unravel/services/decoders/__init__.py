"""Decoders, each reversing one keyless encoding."""

# The registry must be imported first: it loads every decoder module in
# dispatch order.
from unravel.services.decoders.registry import DecoderRegistry
from unravel.services.decoders.base import Decoder, TransformDecoder, check_string_success
from unravel.services.decoders.base64_standard import Base64Decoder
from unravel.services.decoders.base64_url import Base64URLDecoder
from unravel.services.decoders.base91 import Base91Decoder
from unravel.services.decoders.caesar import CaesarDecoder, caesar_shift
from unravel.services.decoders.morse_code import MorseCodeDecoder
from unravel.services.decoders.reverse import ReverseDecoder
from unravel.services.decoders.z85 import Z85Decoder

__all__ = [
    "Base64Decoder",
    "Base64URLDecoder",
    "Base91Decoder",
    "CaesarDecoder",
    "Decoder",
    "DecoderRegistry",
    "MorseCodeDecoder",
    "ReverseDecoder",
    "TransformDecoder",
    "Z85Decoder",
    "caesar_shift",
    "check_string_success",
]
