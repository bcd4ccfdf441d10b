from passcraft.evaluator import evaluate, explain, summarize
from passcraft.analyzer import analyze

def test_evaluate_common_password():
    result = evaluate("password")
    assert result["is_common"] is True
    assert result["score"] == 0.0
    assert result["label"] == "VERY DANGEROUS"
    assert any("common" in e.lower() for e in result["explanations"])

def test_evaluate_strong_password():
    result = evaluate("X7f!9Lq@2Vb#tR4sYp8K")
    assert result["length"] == 20
    assert result["score"] >= 90
    assert result["crack_times"] == "centuries"
    assert result["entropy_bits"] > 50

def test_explanations_for_patterns():
    notes = " ".join(explain(analyze("aabc"))).lower()
    assert "short" in notes
    assert "repeated" in notes
    assert "sequential" in notes

def test_explanations_when_clean():
    notes = explain(analyze("Xq7!Lz2#Vb9@"))
    assert notes == ["No obvious repeats, sequences, or missing character classes detected."]

def test_summarize_matches_evaluate():
    pw = "X7f!9Lq@2Vb#tR4sYp8K"
    summary = summarize(pw)
    full = evaluate(pw)
    assert summary == {k: full[k] for k in ("score", "label", "crack_times")}
