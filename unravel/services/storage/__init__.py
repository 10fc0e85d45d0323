"""Read-only lexical resources shared by checkers and decoders."""

from unravel.services.storage.dictionaries import get_dictionaries, get_dictionary
from unravel.services.storage.tables import MORSE_CODE_TABLE

__all__ = [
    "MORSE_CODE_TABLE",
    "get_dictionaries",
    "get_dictionary",
]
