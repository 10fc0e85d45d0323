"""
Bundled word lists.

Every ``*.txt`` file shipped in the ``dictionaries`` directory becomes one
corpus, keyed by its file stem. Corpora are loaded once per process and are
read-only afterwards, so checkers on any number of worker threads can share
them without locking.
"""

import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Mapping

from unravel.core.exceptions import LexiconLoadError

logger = logging.getLogger(__name__)

DICTIONARY_PACKAGE = "unravel.services.storage"
DICTIONARY_DIR = "dictionaries"


def parse_corpus(name: str, content: bytes) -> frozenset[str]:
    """Split a raw corpus into its whitespace-separated tokens."""
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LexiconLoadError(name, f"not valid UTF-8 ({e.reason})") from e
    return frozenset(text.split())


@lru_cache(maxsize=None)
def get_dictionaries() -> Mapping[str, frozenset[str]]:
    """
    Load every bundled corpus.

    Returns:
        Read-only mapping of corpus name to its set of tokens

    Raises:
        LexiconLoadError: If any corpus is not valid UTF-8
    """
    entries: dict[str, frozenset[str]] = {}
    directory = resources.files(DICTIONARY_PACKAGE).joinpath(DICTIONARY_DIR)

    for entry in sorted(directory.iterdir(), key=lambda e: e.name):
        if not entry.name.endswith(".txt"):
            continue
        name = entry.name[: -len(".txt")]
        entries[name] = parse_corpus(name, entry.read_bytes())
        logger.debug("Loaded corpus %s with %d tokens", name, len(entries[name]))

    return MappingProxyType(entries)


def get_dictionary(name: str) -> frozenset[str]:
    """Get a single corpus by name."""
    try:
        return get_dictionaries()[name]
    except KeyError:
        raise LexiconLoadError(name, "no such corpus is bundled") from None
