from typing import Iterable, Type

from unravel.core.exceptions import DecoderNotFoundError
from unravel.services.analysis.statistics import shannon_entropy
from unravel.services.decoders.base import Decoder


class DecoderRegistry:
    """
    Registry for decoders.

    Decoders register themselves when their module is imported; the import
    order in ``_load_decoders`` fixes the dispatch order. Nothing is added
    or removed once the decoder modules are loaded.
    """

    _decoders: dict[str, Type[Decoder]] = {}
    _instances: dict[str, Decoder] = {}

    @classmethod
    def register(cls, decoder_class: Type[Decoder]) -> Type[Decoder]:
        """
        Register a decoder class.

        Can be used as a decorator:
            @DecoderRegistry.register
            class ReverseDecoder(Decoder):
                ...

        Args:
            decoder_class: The decoder class to register

        Returns:
            The decoder class (for decorator usage)
        """
        cls._decoders[decoder_class.name] = decoder_class
        # Instances are built at import time, before any worker thread exists
        cls._instances[decoder_class.name] = decoder_class()
        return decoder_class

    def get_decoder(self, name: str) -> Decoder:
        """
        Get the shared decoder instance registered under a name.

        Raises:
            DecoderNotFoundError: If no decoder has that name
        """
        try:
            return self._instances[name]
        except KeyError:
            raise DecoderNotFoundError(name) from None

    def get_all_decoders(self) -> tuple[Decoder, ...]:
        """All registered decoders, in registration order."""
        return tuple(self.get_decoder(name) for name in self._decoders)

    def filter_by_tags(self, tags: Iterable[str]) -> tuple[Decoder, ...]:
        """Decoders carrying at least one of the given tags."""
        wanted = set(tags)
        return tuple(d for d in self.get_all_decoders() if d.tags & wanted)

    def filter_by_entropy(self, text: str) -> tuple[Decoder, ...]:
        """
        Decoders whose typical entropy band contains the text's entropy.

        Advisory only: the dispatch engine never applies this itself.
        """
        entropy = shannon_entropy(text)
        return tuple(
            d
            for d in self.get_all_decoders()
            if d.normalised_entropy[0] <= entropy <= d.normalised_entropy[1]
        )

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered decoder names, in registration order."""
        return list(cls._decoders.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._decoders


# Import decoders to trigger registration
def _load_decoders() -> None:
    """Load all decoder modules; this order is the dispatch order."""
    from unravel.services.decoders import (  # noqa: F401
        base64_standard,
        base64_url,
        base91,
        z85,
        caesar,
        morse_code,
        reverse,
    )


# Load decoders when module is imported
_load_decoders()
