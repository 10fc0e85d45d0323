"""
Structural pattern checker.

Recognises well-known token formats (IP addresses, e-mails, URLs, API keys,
CTF flags ...) with a fixed battery of regular expressions. It has no
understanding of natural language; it only answers whether the whole text
is one of the formats it knows.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from unravel.core.config import get_settings
from unravel.models.schemas import CheckResult
from unravel.services.checkers.base import Checker

logger = logging.getLogger(__name__)


def luhn_valid(number: str) -> bool:
    """Validate a card number with the Luhn checksum."""
    digits = [int(d) for d in number if d.isdigit()]
    checksum = 0
    for i, digit in enumerate(reversed(digits)):
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return bool(digits) and checksum % 10 == 0


@dataclass(frozen=True)
class Pattern:
    """A named structural signature."""

    name: str
    regex: re.Pattern[str]
    # How unlikely a random string is to match, 0 (common) to 1 (rare)
    rarity: float
    tags: frozenset[str] = field(default_factory=frozenset)
    validator: Callable[[str], bool] | None = None

    def matches(self, text: str) -> bool:
        if self.regex.fullmatch(text) is None:
            return False
        return self.validator is None or self.validator(text)


def _pattern(
    name: str,
    regex: str,
    rarity: float,
    tags: tuple[str, ...] = (),
    flags: int = 0,
    validator: Callable[[str], bool] | None = None,
) -> Pattern:
    return Pattern(
        name=name,
        regex=re.compile(regex, flags),
        rarity=rarity,
        tags=frozenset(tags),
        validator=validator,
    )


_IPV4_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_HEX4 = r"[0-9a-fA-F]{1,4}"

# Ordered from most to least specific
DEFAULT_PATTERNS: tuple[Pattern, ...] = (
    _pattern(
        "Capture The Flag (CTF) Flag",
        r"(?:flag|ctf|picoctf|thm|htb|ductf)\{[^{}\s]+\}",
        1.0,
        ("CTF Flag",),
        re.IGNORECASE,
    ),
    _pattern(
        "JSON Web Token (JWT)",
        r"eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*",
        1.0,
        ("Credentials", "Bug Bounty"),
    ),
    _pattern(
        "Amazon Web Services Access Key",
        r"(?:AKIA|ASIA|AGPA|AIDA|AROA|ANPA|ANVA|AIPA)[A-Z0-9]{16}",
        1.0,
        ("Credentials", "AWS", "Bug Bounty"),
    ),
    _pattern(
        "GitHub Access Token",
        r"gh[pousr]_[A-Za-z0-9]{36}",
        1.0,
        ("Credentials", "GitHub", "Bug Bounty"),
    ),
    _pattern(
        "Slack Token",
        r"xox[baprs]-[0-9A-Za-z-]{10,48}",
        1.0,
        ("Credentials", "Slack", "Bug Bounty"),
    ),
    _pattern(
        "Google API Key",
        r"AIza[0-9A-Za-z_-]{35}",
        1.0,
        ("Credentials", "Google", "Bug Bounty"),
    ),
    _pattern(
        "Stripe API Key",
        r"(?:sk|pk|rk)_(?:live|test)_[0-9a-zA-Z]{24,99}",
        1.0,
        ("Credentials", "Stripe", "Bug Bounty"),
    ),
    _pattern(
        "Private Key",
        r"-----BEGIN (?:RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----[\s\S]+",
        1.0,
        ("Credentials",),
    ),
    _pattern(
        "Ethereum (ETH) Wallet Address",
        r"0x[a-fA-F0-9]{40}",
        1.0,
        ("Cryptocurrency Wallet", "Ethereum"),
    ),
    _pattern(
        "Bitcoin (₿) Wallet Address",
        r"[13][a-km-zA-HJ-NP-Z1-9]{25,34}|bc1[a-z0-9]{39,59}",
        0.7,
        ("Cryptocurrency Wallet", "Bitcoin"),
    ),
    _pattern(
        "YouTube Video",
        r"(?:https?://)?(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)[\w-]{11}",
        1.0,
        ("Media", "URL"),
    ),
    _pattern(
        "Uniform Resource Locator (URL)",
        r"(?:https?|ftp)://[^\s/$.?#][^\s]*",
        0.5,
        ("Network", "URL"),
        re.IGNORECASE,
    ),
    _pattern(
        "Email Address",
        r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}",
        0.5,
        ("Identifiers", "Email"),
    ),
    _pattern(
        "Internet Protocol (IP) Address Version 4",
        rf"(?:{_IPV4_OCTET}\.){{3}}{_IPV4_OCTET}(?::\d{{1,5}})?",
        0.5,
        ("Identifiers", "Networking", "IP"),
    ),
    _pattern(
        "Internet Protocol (IP) Address Version 6",
        rf"(?:{_HEX4}:){{7}}{_HEX4}"
        rf"|(?:{_HEX4}:){{1,6}}(?::{_HEX4}){{1,6}}"
        rf"|(?:{_HEX4}:){{1,7}}:"
        rf"|::(?:{_HEX4}:){{0,6}}{_HEX4}",
        0.5,
        ("Identifiers", "Networking", "IP"),
    ),
    _pattern(
        "MAC Address",
        r"(?:[0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}",
        0.5,
        ("Identifiers", "Networking"),
    ),
    _pattern(
        "Universally Unique Identifier (UUID)",
        r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}",
        0.3,
        ("Identifiers",),
    ),
    _pattern(
        "Visa Card Number",
        r"4\d{12}(?:\d{3})?",
        0.5,
        ("Credit Card", "Finance"),
        validator=luhn_valid,
    ),
    _pattern(
        "MasterCard Number",
        r"5[1-5]\d{14}",
        0.5,
        ("Credit Card", "Finance"),
        validator=luhn_valid,
    ),
    _pattern(
        "American Express Card Number",
        r"3[47]\d{13}",
        0.5,
        ("Credit Card", "Finance"),
        validator=luhn_valid,
    ),
    _pattern(
        "American Social Security Number",
        r"(?!000|666|9\d\d)\d{3}-(?!00)\d{2}-(?!0000)\d{4}",
        0.3,
        ("Personally Identifiable Information",),
    ),
    _pattern(
        "Phone Number",
        r"\+[1-9]\d{7,14}",
        0.1,
        ("Personally Identifiable Information",),
    ),
    _pattern(
        "Latitude & Longitude Coordinates",
        r"[-+]?(?:[1-8]?\d(?:\.\d+)?|90(?:\.0+)?),\s*[-+]?(?:180(?:\.0+)?|(?:1[0-7]\d|[1-9]?\d)(?:\.\d+)?)",
        0.05,
        ("Coordinates",),
    ),
)


class PatternChecker(Checker):
    """
    Checks whether text is exactly one known structured token.

    Patterns with a rarity below ``min_rarity`` are skipped; very common shapes
    (e.g. "12,34" as coordinates) would otherwise flag almost anything.
    """

    name = "Pattern Checker"
    description = "Matches text against regular expressions of well-known token formats."
    link = "https://github.com/bee-san/pyWhat"

    def __init__(
        self,
        patterns: tuple[Pattern, ...] = DEFAULT_PATTERNS,
        min_rarity: float | None = None,
    ):
        if min_rarity is None:
            min_rarity = get_settings().pattern_min_rarity
        self.min_rarity = min_rarity
        self.patterns = tuple(p for p in patterns if p.rarity >= min_rarity)

    def check(self, text: str) -> CheckResult:
        stripped = text.strip()
        if not stripped:
            return self._result(text, False)

        for pattern in self.patterns:
            if pattern.matches(stripped):
                logger.debug("Pattern %r matched %r", pattern.name, stripped)
                return self._result(text, True, pattern.name)

        return self._result(text, False)

    def identify(self, text: str) -> list[Pattern]:
        """Return every enabled pattern matching the text."""
        stripped = text.strip()
        return [p for p in self.patterns if stripped and p.matches(stripped)]
