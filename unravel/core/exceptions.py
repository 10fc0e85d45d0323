from typing import Any


class UnravelError(Exception):
    """Base exception for all decoding errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(UnravelError):
    """Raised when input validation fails."""

    pass


class CiphertextTooLongError(ValidationError):
    """Raised when ciphertext exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Ciphertext length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class DecoderError(UnravelError):
    """Base exception for decoder errors."""

    pass


class DecoderNotFoundError(DecoderError):
    """Raised when a requested decoder is not registered."""

    def __init__(self, decoder_name: str):
        super().__init__(
            f"Decoder '{decoder_name}' not found",
            {"decoder_name": decoder_name},
        )


class LexiconLoadError(UnravelError):
    """
    Raised when a bundled word list cannot be loaded.

    This is fatal: nothing may be decoded until every corpus has loaded.
    """

    def __init__(self, corpus: str, reason: str):
        super().__init__(
            f"Could not load corpus '{corpus}': {reason}",
            {"corpus": corpus, "reason": reason},
        )
