"""Tests for the parallel dispatch engine."""

import logging
import threading

import pytest

from unravel.models.schemas import DecodeOutcome
from unravel.services.checkers.base import Checker
from unravel.services.decoders import Decoder, DecoderRegistry, ReverseDecoder
from unravel.services.filtration import (
    DecoderBatch,
    Exhausted,
    Matched,
    filter_and_get_decoders,
)


class AlwaysDecoder(Decoder):
    """Stub decoder whose output the checker always accepts."""

    name = "always"
    description = "Decodes everything to 'decoded'."

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        verdict = checker.check("decoded")
        return DecodeOutcome.from_check(self, text, ["decoded"], verdict)


class NeverDecoder(Decoder):
    """Stub decoder that never produces anything."""

    name = "never"
    description = "Never decodes."

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        return DecodeOutcome.no_result(self, text)


class BlockingDecoder(Decoder):
    """Stub decoder that waits until released before giving up."""

    name = "blocking"
    description = "Blocks until released."

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        self.started.set()
        self.release.wait(timeout=10)
        return DecodeOutcome.no_result(self, text)


class RaisingDecoder(Decoder):
    """Stub decoder with a bug."""

    name = "raising"
    description = "Always raises."

    def crack(self, text: str, checker: Checker) -> DecodeOutcome:
        raise RuntimeError("boom")


class TestDecoderBatch:
    """Test suite for DecoderBatch."""

    def test_empty_batch_is_exhausted(self, accept_all):
        result = DecoderBatch([], max_workers=2).run("anything", accept_all)
        assert result == Exhausted(outcomes=())

    def test_first_success_wins(self, accept_all):
        batch = DecoderBatch([NeverDecoder(), AlwaysDecoder()], max_workers=2)
        result = batch.run("input", accept_all)
        assert isinstance(result, Matched)
        assert result.outcome.decoder == "always"
        assert result.outcome.plaintext == "decoded"

    def test_matched_outcome_equals_the_successful_attempt(self, accept_all):
        """Whatever finishes first, the single successful outcome is returned as is."""
        decoders = [NeverDecoder(), AlwaysDecoder(), NeverDecoder()]
        result = DecoderBatch(decoders, max_workers=3).run("input", accept_all)
        assert result == Matched(outcome=AlwaysDecoder().attempt("input", accept_all))

    def test_success_does_not_wait_for_slow_decoders(self, accept_all):
        """A match is returned while another decoder is still running."""
        blocking = BlockingDecoder()
        batch = DecoderBatch([blocking, AlwaysDecoder()], max_workers=2)
        try:
            result = batch.run("input", accept_all)
            assert isinstance(result, Matched)
            assert blocking.started.wait(timeout=5)
            assert not blocking.release.is_set()
        finally:
            blocking.release.set()

    def test_exhausted_collects_every_outcome(self, reject_all):
        batch = DecoderBatch([NeverDecoder(), AlwaysDecoder(), ReverseDecoder()], max_workers=3)
        result = batch.run("input", reject_all)
        assert isinstance(result, Exhausted)
        assert sorted(o.decoder for o in result.outcomes) == ["Reverse", "always", "never"]
        assert not any(o.success for o in result.outcomes)

    def test_raising_decoder_is_isolated(self, accept_all, caplog):
        batch = DecoderBatch([RaisingDecoder(), AlwaysDecoder()], max_workers=2)
        with caplog.at_level(logging.WARNING, logger="unravel"):
            result = batch.run("input", accept_all)
        assert isinstance(result, Matched)
        assert result.outcome.decoder == "always"

    def test_raising_decoder_becomes_no_result(self, accept_all, caplog):
        batch = DecoderBatch([RaisingDecoder()], max_workers=1)
        with caplog.at_level(logging.WARNING, logger="unravel"):
            result = batch.run("input", accept_all)
        assert isinstance(result, Exhausted)
        assert len(result.outcomes) == 1
        assert result.outcomes[0].success is False
        assert result.outcomes[0].candidates == ()
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_batch_is_reusable(self, accept_all):
        batch = DecoderBatch([AlwaysDecoder()], max_workers=1)
        assert isinstance(batch.run("one", accept_all), Matched)
        assert isinstance(batch.run("two", accept_all), Matched)

    def test_default_worker_count(self):
        assert DecoderBatch([NeverDecoder()]).max_workers >= 1


class TestRegisteredBatch:
    """Dispatch over the full decoder registry."""

    @pytest.fixture
    def batch(self):
        return filter_and_get_decoders()

    def test_batch_holds_every_decoder(self, batch):
        assert len(batch) == len(DecoderRegistry.list_registered())

    def test_decodes_base64(self, batch, combined_checker):
        result = batch.run("aGVsbG8gd29ybGQ=", combined_checker)
        assert isinstance(result, Matched)
        assert result.outcome.plaintext == "hello world"
        assert result.outcome.decoder in {"base64", "base64_url"}

    def test_decodes_reversed_text(self, batch, combined_checker):
        result = batch.run("dlrow olleh", combined_checker)
        assert isinstance(result, Matched)
        assert result.outcome.plaintext == "hello world"

    def test_unknown_input_exhausts_every_decoder(self, batch, combined_checker):
        result = batch.run("%%%%", combined_checker)
        assert isinstance(result, Exhausted)
        assert len(result.outcomes) == len(batch)
        assert {o.decoder for o in result.outcomes} == set(DecoderRegistry.list_registered())
