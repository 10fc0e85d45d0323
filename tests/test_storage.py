"""Tests for the bundled lexical resources."""

import pytest

from unravel.core.exceptions import LexiconLoadError
from unravel.services.analysis.statistics import shannon_entropy
from unravel.services.storage import MORSE_CODE_TABLE, get_dictionaries, get_dictionary
from unravel.services.storage.dictionaries import parse_corpus


class TestDictionaries:
    """Test suite for corpus loading."""

    def test_english_corpus_is_bundled(self):
        words = get_dictionary("english")
        assert {"hello", "world", "the"} <= words

    def test_loaded_once(self):
        assert get_dictionaries() is get_dictionaries()

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            get_dictionaries()["english"] = frozenset()

    def test_unknown_corpus(self):
        with pytest.raises(LexiconLoadError):
            get_dictionary("klingon")

    def test_parse_corpus(self):
        assert parse_corpus("tiny", b"one two\nthree\n") == frozenset({"one", "two", "three"})

    def test_invalid_utf8_is_fatal(self):
        with pytest.raises(LexiconLoadError) as exc_info:
            parse_corpus("broken", b"hello \xff\xfe world")
        assert exc_info.value.details["corpus"] == "broken"


class TestMorseTable:
    """Test suite for the Morse code table."""

    def test_letters_and_digits(self):
        assert MORSE_CODE_TABLE[".-"] == "A"
        assert MORSE_CODE_TABLE["-----"] == "0"

    def test_word_separators(self):
        assert MORSE_CODE_TABLE["/"] == " "
        assert MORSE_CODE_TABLE[""] == " "

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MORSE_CODE_TABLE["...---..."] = "SOS"


class TestShannonEntropy:
    """Test suite for the entropy helper."""

    def test_empty(self):
        assert shannon_entropy("") == 0.0

    def test_constant_text(self):
        assert shannon_entropy("aaaa") == 0.0

    def test_two_symbols(self):
        assert shannon_entropy("abab") == pytest.approx(1.0)
