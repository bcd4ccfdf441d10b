from dataclasses import replace

from passcraft.analyzer import CompositionFacts, analyze
from passcraft.scorer import score, strength_label

def _facts(length, **kw):
    base = dict(
        password="",
        length=length,
        lowercase_letters_count=length // 2,
        uppercase_letters_count=length - length // 2,
    )
    base.update(kw)
    return CompositionFacts(**base)

def test_score_in_range():
    for pw in ("", "a", "password", "X7f!9Lq@2Vb#tR4sYp", "é" * 40, "aaaaaaaaaaaa"):
        s = score(analyze(pw))
        assert 0.0 <= s <= 100.0

def test_score_non_decreasing_in_length():
    previous = -1.0
    for n in range(1, 40):
        s = score(_facts(n, consecutive_count=1, progressive_count=1))
        assert s >= previous
        previous = s

def test_penalized_patterns_never_raise_score():
    base = _facts(16, numbers_count=0)
    s = score(base)
    assert score(replace(base, consecutive_count=3)) <= s
    assert score(replace(base, progressive_count=3)) <= s
    assert score(replace(base, non_consecutive_count=3)) <= s

def test_common_password_scores_minimum():
    assert score(analyze("password")) == 0.0
    # same composition, not common
    assert score(replace(analyze("password"), is_common=False)) > 0.0

def test_random_password_scores_high():
    s = score(analyze("X7f!9Lq@2Vb#tR4sYp"))
    assert s >= 90
    assert strength_label(s) in ("STRONG", "VERY STRONG", "INVULNERABLE")

def test_short_password_scores_low():
    assert score(analyze("ab1")) < 20

def test_empty_scores_zero():
    assert score(analyze("")) == 0.0

def test_labels():
    assert strength_label(0) == "VERY DANGEROUS"
    assert strength_label(20) == "DANGEROUS"
    assert strength_label(59.9) == "VERY WEAK"
    assert strength_label(70) == "WEAK"
    assert strength_label(85) == "GOOD"
    assert strength_label(92) == "STRONG"
    assert strength_label(97) == "VERY STRONG"
    assert strength_label(100) == "INVULNERABLE"
