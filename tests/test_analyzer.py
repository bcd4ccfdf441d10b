from passcraft.analyzer import analyze, is_common_password

def test_empty_password():
    facts = analyze("")
    assert facts.length == 0
    assert facts.spaces_count == 0
    assert facts.numbers_count == 0
    assert facts.lowercase_letters_count == 0
    assert facts.uppercase_letters_count == 0
    assert facts.symbols_count == 0
    assert facts.other_characters_count == 0
    assert facts.consecutive_count == 0
    assert facts.non_consecutive_count == 0
    assert facts.progressive_count == 0
    assert facts.is_common is False

def test_repeated_letters():
    facts = analyze("aaaa")
    assert facts.consecutive_count == 3
    assert facts.lowercase_letters_count == 4
    assert facts.numbers_count == 0
    assert facts.non_consecutive_count == 0
    assert facts.progressive_count == 0

def test_classification():
    facts = analyze("aB3 !é")
    assert facts.length == 6
    assert facts.lowercase_letters_count == 1
    assert facts.uppercase_letters_count == 1
    assert facts.numbers_count == 1
    assert facts.spaces_count == 1
    assert facts.symbols_count == 1
    assert facts.other_characters_count == 1

def test_progressive_pairs():
    assert analyze("abc").progressive_count == 2
    assert analyze("cba").progressive_count == 2
    assert analyze("1234").progressive_count == 3
    assert analyze("aza").progressive_count == 0

def test_non_consecutive_repeats():
    facts = analyze("abab")
    assert facts.non_consecutive_count == 2
    assert facts.consecutive_count == 0
    facts = analyze("aaba")
    assert facts.consecutive_count == 1
    assert facts.non_consecutive_count == 1

def test_common_password_lookup_is_case_sensitive():
    assert is_common_password("password")
    assert analyze("password").is_common
    assert not is_common_password("PaSsWoRd-not-common")
    assert not analyze("xK9#qLw2!vB7").is_common

def test_to_dict_has_all_fields():
    d = analyze("Hello1").to_dict()
    assert d["password"] == "Hello1"
    assert d["length"] == 6
    assert d["consecutive_count"] == 1
    assert set(d) >= {"numbers_count", "symbols_count", "is_common"}
