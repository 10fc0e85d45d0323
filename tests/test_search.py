"""Tests for the layered breadth-first search."""

import pytest

from unravel.services.decoders import Base64Decoder, CaesarDecoder, ReverseDecoder
from unravel.services.filtration import DecoderBatch
from unravel.services.search import LayeredSearch

# base64("hello world"), reversed
REVERSED_BASE64 = "=QGby92dg8GbsVGa"


class TestLayeredSearch:
    """Test suite for LayeredSearch."""

    @pytest.fixture
    def batch(self):
        return DecoderBatch([ReverseDecoder(), Base64Decoder()], max_workers=2)

    def test_peels_two_layers(self, batch, combined_checker):
        result = LayeredSearch(batch, combined_checker, max_depth=3).search(REVERSED_BASE64)
        assert result.found is True
        assert result.plaintext == "hello world"
        assert [step.decoder for step in result.path] == ["Reverse", "base64"]
        assert result.path[0].candidates == ("aGVsbG8gd29ybGQ=",)
        assert result.nodes_expanded == 2
        assert result.depth_reached == 2

    def test_single_layer(self, batch, combined_checker):
        result = LayeredSearch(batch, combined_checker).search("aGVsbG8gd29ybGQ=")
        assert result.found is True
        assert len(result.path) == 1
        assert result.nodes_expanded == 1

    def test_depth_limit(self, batch, combined_checker):
        result = LayeredSearch(batch, combined_checker, max_depth=1).search(REVERSED_BASE64)
        assert result.found is False
        assert result.plaintext is None
        assert result.path == []
        assert result.nodes_expanded == 1

    def test_cycles_are_not_expanded_twice(self, reject_all):
        """Reversing twice gives back the input, which is never searched again."""
        batch = DecoderBatch([ReverseDecoder()], max_workers=1)
        result = LayeredSearch(batch, reject_all, max_depth=10).search("ab")
        assert result.found is False
        assert result.nodes_expanded == 2

    def test_node_limit(self, reject_all):
        batch = DecoderBatch([CaesarDecoder()], max_workers=1)
        result = LayeredSearch(batch, reject_all, max_depth=3, max_nodes=3).search("abc")
        assert result.found is False
        assert result.nodes_expanded == 3

    def test_rejected_match_is_discarded(self, combined_checker):
        offered = []

        def confirm(outcome):
            offered.append(outcome.plaintext)
            return False

        batch = DecoderBatch([Base64Decoder()], max_workers=1)
        result = LayeredSearch(batch, combined_checker, confirm=confirm).search("aGVsbG8gd29ybGQ=")
        assert result.found is False
        assert offered == ["hello world"]

    def test_accepted_match_is_returned(self, batch, combined_checker):
        result = LayeredSearch(
            batch, combined_checker, confirm=lambda outcome: True
        ).search(REVERSED_BASE64)
        assert result.found is True
        assert result.plaintext == "hello world"
