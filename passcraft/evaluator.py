"""
passcraft.evaluator

One-call password report for the CLI and the web API:
- analyze(password): structural facts
- score(facts) / strength_label(score): 0-100 score and its bucket
- estimate(password): zxcvbn-based crack time at 1e4 guesses/second
plus short explanations of the weaknesses found.
"""

from typing import Dict, List

from .analyzer import CompositionFacts, analyze
from .crack_time import estimate
from .scorer import score, strength_label


def explain(facts: CompositionFacts) -> List[str]:
    explanations: List[str] = []
    if facts.is_common:
        explanations.append("This is a commonly used password.")
    if facts.length < 8:
        explanations.append("Password is very short (<8 characters).")
    missing = [
        name
        for name, count in (
            ("lowercase letters", facts.lowercase_letters_count),
            ("uppercase letters", facts.uppercase_letters_count),
            ("digits", facts.numbers_count),
            ("symbols", facts.symbols_count),
        )
        if count == 0
    ]
    if facts.length and missing:
        explanations.append(f"No {', '.join(missing)}.")
    if facts.consecutive_count:
        explanations.append(f"{facts.consecutive_count} repeated adjacent character(s).")
    if facts.progressive_count:
        explanations.append(f"{facts.progressive_count} sequential character pair(s) like 'ab' or '12'.")
    if facts.non_consecutive_count:
        explanations.append(f"{facts.non_consecutive_count} character(s) reused elsewhere in the password.")
    if not explanations:
        explanations.append("No obvious repeats, sequences, or missing character classes detected.")
    return explanations


def evaluate(password: str) -> Dict:
    """
    Returns a dict:
    {
        <every CompositionFacts field>,
        "score": float,  # 0..100
        "label": str,
        "crack_times": str,
        "crack_seconds": float,
        "entropy_bits": float,
        "explanations": [str]
    }
    """
    facts = analyze(password)
    value = score(facts)
    crack = estimate(password)
    result = facts.to_dict()
    result.update(
        {
            "score": value,
            "label": strength_label(value),
            "crack_times": crack.display,
            "crack_seconds": crack.seconds,
            "entropy_bits": crack.entropy_bits,
            "explanations": explain(facts),
        }
    )
    return result


def summarize(password: str) -> Dict:
    """Score, label and crack time shown next to a freshly generated password."""
    value = score(analyze(password))
    return {
        "score": value,
        "label": strength_label(value),
        "crack_times": estimate(password).display,
    }
