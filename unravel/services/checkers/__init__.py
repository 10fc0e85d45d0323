"""Plausibility checkers deciding whether decoded text looks like plaintext."""

from unravel.services.checkers.base import Checker
from unravel.services.checkers.combined import CombinedChecker
from unravel.services.checkers.english import EnglishChecker
from unravel.services.checkers.pattern import PatternChecker

__all__ = [
    "Checker",
    "CombinedChecker",
    "EnglishChecker",
    "PatternChecker",
]
