"""
passcraft.scorer
Turns CompositionFacts into a 0-100 strength score and a label.
"""

from .analyzer import CompositionFacts

# maximum reachable score by length (ASCII characters only); 15+ reaches 100
LENGTH_SCORES = (0.0, 2.0, 5.0, 9.0, 16.0, 24.0, 30.0, 45.0, 59.0, 70.0, 79.0, 85.0, 90.0, 95.0, 98.0)

# fraction of the maximum lost for each missing core class
MISSING_CLASS_PENALTY = 0.1

LABELS = (
    (20, "VERY DANGEROUS"),
    (40, "DANGEROUS"),
    (60, "VERY WEAK"),
    (80, "WEAK"),
    (90, "GOOD"),
    (95, "STRONG"),
    (99, "VERY STRONG"),
)


def _max_score(facts: CompositionFacts) -> float:
    ascii_length = facts.length - facts.other_characters_count
    if ascii_length < len(LENGTH_SCORES):
        base = LENGTH_SCORES[ascii_length]
    else:
        base = 100.0
    return min(100.0, base + facts.other_characters_count * 5.0)


def score(facts: CompositionFacts) -> float:
    """
    Score a password from its composition facts.

    The length gives a maximum; missing classes and repetitive patterns take
    fractions of it away. Common passwords always score 0.
    """
    if facts.is_common:
        return 0.0
    max_score = _max_score(facts)
    if max_score <= 0 or facts.length <= 0:
        return 0.0

    penalty = 0.0
    for count in (
        facts.lowercase_letters_count,
        facts.uppercase_letters_count,
        facts.numbers_count,
        facts.symbols_count,
    ):
        if count == 0:
            penalty += MISSING_CLASS_PENALTY

    penalty += facts.consecutive_count / facts.length / 5.0
    penalty += facts.progressive_count / facts.length / 5.0
    penalty += facts.non_consecutive_count / facts.length / 10.0

    result = max_score * (1.0 - penalty)

    if facts.spaces_count >= 1:
        result += min(facts.spaces_count, 3)
    if facts.lowercase_letters_count >= 1 and facts.uppercase_letters_count >= 1:
        result += 1.0
    if facts.symbols_count >= 1:
        result += 1.0

    return max(0.0, min(result, max_score))


def strength_label(value: float) -> str:
    for upper, label in LABELS:
        if value < upper:
            return label
    return "INVULNERABLE"
