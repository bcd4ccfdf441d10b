import string

import pytest

from passcraft.errors import ConfigurationError
from passcraft.generator import (
    CharacterClass,
    DEFAULT_SYMBOLS,
    GenerationSpec,
    SIMILAR_CHARACTERS,
    build_pools,
    generate,
    generate_pin,
    generate_secret,
)

def test_length_and_classes():
    pw = generate(length=12, use_symbols=True)
    assert len(pw) == 12
    assert any(c.isupper() for c in pw)
    assert any(c.islower() for c in pw)
    assert any(c.isdigit() for c in pw)
    assert any(c in DEFAULT_SYMBOLS for c in pw)

def test_no_symbols_by_default():
    pw = generate(length=10)
    assert len(pw) == 10
    assert not any(c in DEFAULT_SYMBOLS for c in pw)

def test_too_short_raises():
    with pytest.raises(ConfigurationError):
        generate(length=2, use_upper=True, use_lower=True, use_digits=True, use_symbols=True)

def test_too_short_is_value_error():
    try:
        generate(length=3, use_symbols=True)
        raised = False
    except ValueError:
        raised = True
    assert raised

def test_non_strict_allows_short_length():
    pw = generate(length=2, use_symbols=True, strict=False)
    assert len(pw) == 2

def test_no_class_enabled_raises():
    with pytest.raises(ConfigurationError):
        generate(length=8, use_upper=False, use_lower=False, use_digits=False)

def test_zero_length_raises():
    with pytest.raises(ConfigurationError):
        generate(length=0)

def test_strict_always_covers_every_class():
    spec = GenerationSpec.from_flags(5, symbols=True, spaces=True)
    pools = build_pools(spec)
    for _ in range(300):
        pw = generate_secret(spec)
        assert len(pw) == 5
        assert all(c in pools.pool for c in pw)
        for sub_pool in pools.class_pools.values():
            assert any(c in sub_pool for c in pw)

def test_exclude_similar_never_emits_confusables():
    for _ in range(200):
        pw = generate(length=32, use_symbols=True, exclude_similar=True)
        assert not SIMILAR_CHARACTERS.intersection(pw)

def test_exclude_similar_applied_to_pools():
    spec = GenerationSpec.from_flags(8, symbols=True, exclude_similar=True)
    pools = build_pools(spec)
    assert "0" not in pools.class_pools[CharacterClass.DIGIT]
    assert "l" not in pools.class_pools[CharacterClass.LOWERCASE]
    assert "O" not in pools.pool
    assert "|" not in pools.class_pools[CharacterClass.SYMBOL]

def test_exclusion_emptying_a_class_raises():
    spec = GenerationSpec.from_flags(8, symbols=True, exclude_similar=True, symbol_chars="|`")
    with pytest.raises(ConfigurationError):
        build_pools(spec)

def test_custom_symbols():
    pw = generate(length=40, use_upper=False, use_lower=False, use_digits=False, use_symbols=True, symbols="#")
    assert pw == "#" * 40

def test_spaces_class():
    spec = GenerationSpec(length=3, classes=frozenset({CharacterClass.SPACE, CharacterClass.DIGIT}))
    pw = generate_secret(spec)
    assert " " in pw
    assert all(c == " " or c in string.digits for c in pw)

def test_mandatory_chars_not_always_in_front():
    # a lone digit in a long lowercase password should move around
    positions = set()
    for _ in range(50):
        pw = generate(length=16, use_upper=False)
        positions.update(i for i, c in enumerate(pw) if c.isdigit())
    assert len(positions) > 1

def test_pin_is_digits_only():
    for n in range(1, 13):
        pin = generate_pin(n)
        assert len(pin) == n
        assert all(c in string.digits for c in pin)

def test_pin_default_length():
    assert len(generate_pin()) == 6

def test_pin_zero_length_raises():
    with pytest.raises(ConfigurationError):
        generate_pin(0)
