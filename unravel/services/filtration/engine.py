"""
Dispatch engine.

Runs every decoder against one input in parallel and stops as soon as one
of them produces plausible plaintext.
"""

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Sequence

from unravel.core.config import get_settings
from unravel.models.schemas import DecodeOutcome
from unravel.services.checkers.base import Checker
from unravel.services.decoders.base import Decoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matched:
    """A decoder produced text the checker accepted."""

    outcome: DecodeOutcome


@dataclass(frozen=True)
class Exhausted:
    """
    No decoder succeeded.

    Holds one outcome per decoder, in completion order. Callers must not
    rely on that order.
    """

    outcomes: tuple[DecodeOutcome, ...]


BatchResult = Matched | Exhausted


class DecoderBatch:
    """
    The fixed set of decoders run together against one input.

    Each run fans out one task per decoder on a thread pool. The first
    successful outcome ends the run: tasks that have not started are
    cancelled, tasks already running finish on their own and their results
    are ignored.
    """

    def __init__(self, decoders: Sequence[Decoder], max_workers: int | None = None):
        self.decoders: tuple[Decoder, ...] = tuple(decoders)
        if max_workers is None:
            max_workers = get_settings().max_parallel_decoders or os.cpu_count() or 1
        self.max_workers = max_workers

    def __len__(self) -> int:
        return len(self.decoders)

    def run(self, text: str, checker: Checker) -> BatchResult:
        """
        Run every decoder against the text.

        Args:
            text: The input to decode
            checker: Checker shared by all decoders

        Returns:
            Matched with the winning outcome, or Exhausted with every outcome
        """
        logger.debug("Running %d decoders on %r", len(self.decoders), text)
        if not self.decoders:
            return Exhausted(outcomes=())

        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(self.decoders)),
            thread_name_prefix="decoder",
        )
        try:
            futures: dict[Future[DecodeOutcome], Decoder] = {
                executor.submit(self._attempt, decoder, text, checker): decoder
                for decoder in self.decoders
            }

            failed: list[DecodeOutcome] = []
            for future in as_completed(futures):
                outcome = future.result()
                if outcome.success:
                    logger.info("%s decoded %r", outcome.decoder, text)
                    return Matched(outcome=outcome)
                failed.append(outcome)

            return Exhausted(outcomes=tuple(failed))
        finally:
            # Drop queued attempts; running ones finish in the background
            executor.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _attempt(decoder: Decoder, text: str, checker: Checker) -> DecodeOutcome:
        try:
            return decoder.attempt(text, checker)
        except Exception:
            # attempt() already traps decoder faults; this covers overrides of it
            logger.warning("Decoder %s raised out of attempt()", decoder.name, exc_info=True)
            return DecodeOutcome.no_result(decoder, text)
