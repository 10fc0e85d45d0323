"""
Filtration system: picks the decoders to run and runs them together.
"""

import logging

from unravel.services.decoders import DecoderRegistry
from unravel.services.filtration.engine import BatchResult, DecoderBatch, Exhausted, Matched

logger = logging.getLogger(__name__)


def filter_and_get_decoders(max_workers: int | None = None) -> DecoderBatch:
    """Build a batch of every registered decoder, in registration order."""
    logger.debug("Filtering and getting all decoders")
    return DecoderBatch(DecoderRegistry().get_all_decoders(), max_workers=max_workers)


__all__ = [
    "BatchResult",
    "DecoderBatch",
    "Exhausted",
    "Matched",
    "filter_and_get_decoders",
]
