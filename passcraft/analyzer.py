"""
passcraft.analyzer

Structural analysis of a password:
- per-class character counts (space, digit, lowercase, uppercase, symbol, other)
- consecutive repeats ("aa"), progressive pairs ("ab", "cb", "12")
- repeats that are not adjacent
- membership in the common-password list
"""

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict

from .common_passwords import COMMON_PASSWORDS


@dataclass(frozen=True)
class CompositionFacts:
    password: str
    length: int = 0
    spaces_count: int = 0
    numbers_count: int = 0
    lowercase_letters_count: int = 0
    uppercase_letters_count: int = 0
    symbols_count: int = 0
    other_characters_count: int = 0
    consecutive_count: int = 0
    non_consecutive_count: int = 0
    progressive_count: int = 0
    is_common: bool = False

    def to_dict(self) -> Dict:
        return asdict(self)


def _classify(c: str) -> str:
    code = ord(c)
    if 48 <= code <= 57:
        return "numbers"
    if 65 <= code <= 90:
        return "uppercase_letters"
    if 97 <= code <= 122:
        return "lowercase_letters"
    if code == 32:
        return "spaces"
    # printable ASCII punctuation
    if 33 <= code <= 47 or 58 <= code <= 64 or 91 <= code <= 96 or 123 <= code <= 126:
        return "symbols"
    return "other_characters"


def is_common_password(password: str) -> bool:
    """Case-sensitive lookup in the common-password list."""
    return password in COMMON_PASSWORDS


def analyze(password: str) -> CompositionFacts:
    counts: Counter = Counter()
    consecutive = 0
    progressive = 0
    repeats = 0
    seen = set()
    prev = None

    for c in password:
        counts[_classify(c)] += 1
        if c in seen:
            repeats += 1
        else:
            seen.add(c)
        if prev is not None:
            if c == prev:
                consecutive += 1
            elif abs(ord(c) - ord(prev)) == 1:
                progressive += 1
        prev = c

    # every consecutive pair's second char is also a repeat; the rest are non-adjacent
    non_consecutive = repeats - consecutive

    return CompositionFacts(
        password=password,
        length=len(password),
        spaces_count=counts["spaces"],
        numbers_count=counts["numbers"],
        lowercase_letters_count=counts["lowercase_letters"],
        uppercase_letters_count=counts["uppercase_letters"],
        symbols_count=counts["symbols"],
        other_characters_count=counts["other_characters"],
        consecutive_count=consecutive,
        non_consecutive_count=non_consecutive,
        progressive_count=progressive,
        is_common=is_common_password(password),
    )
