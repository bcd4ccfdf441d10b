"""
passcraft.generator
Constrained password and PIN generator using Python's secrets module.
"""

import enum
import string
from dataclasses import dataclass, field
from secrets import choice, SystemRandom
from typing import Dict, FrozenSet, List, Optional

from .errors import ConfigurationError
from .log import get_logger

logger = get_logger("generator")


class CharacterClass(enum.Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"
    SPACE = "space"


DEFAULT_SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

# confusable glyphs dropped when exclude_similar is set
SIMILAR_CHARACTERS = frozenset("iIlL1oO0|`'\"")

# fixed order so the union pool is stable for a given spec
CLASS_ORDER = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
    CharacterClass.SPACE,
)

_sysrand = SystemRandom()


def _canonical_set(cls: CharacterClass, symbols: Optional[str]) -> str:
    if cls is CharacterClass.LOWERCASE:
        return string.ascii_lowercase
    if cls is CharacterClass.UPPERCASE:
        return string.ascii_uppercase
    if cls is CharacterClass.DIGIT:
        return string.digits
    if cls is CharacterClass.SYMBOL:
        return symbols or DEFAULT_SYMBOLS
    return " "


@dataclass(frozen=True)
class GenerationSpec:
    """
    What to generate: length, enabled character classes and the exclusion/strict rules.

    strict=True guarantees at least one character of every enabled class.
    """

    length: int
    classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)
    exclude_similar: bool = False
    strict: bool = True
    symbols: Optional[str] = None

    @classmethod
    def from_flags(
        cls,
        length: int,
        lowercase: bool = True,
        uppercase: bool = True,
        numbers: bool = True,
        symbols: bool = False,
        spaces: bool = False,
        exclude_similar: bool = False,
        strict: bool = True,
        symbol_chars: Optional[str] = None,
    ) -> "GenerationSpec":
        flags = {
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.DIGIT: numbers,
            CharacterClass.SYMBOL: symbols,
            CharacterClass.SPACE: spaces,
        }
        enabled = frozenset(c for c, on in flags.items() if on)
        return cls(
            length=length,
            classes=enabled,
            exclude_similar=exclude_similar,
            strict=strict,
            symbols=symbol_chars,
        )

    def validate(self) -> None:
        """Raise ConfigurationError if no string can ever satisfy this spec."""
        if not isinstance(self.length, int) or self.length <= 0:
            raise ConfigurationError("length must be > 0")
        if not self.classes:
            raise ConfigurationError("At least one character set must be enabled")
        if self.strict and self.length < len(self.classes):
            raise ConfigurationError(
                f"length {self.length} too small for {len(self.classes)} required character classes"
            )


@dataclass(frozen=True)
class CharacterPools:
    pool: str
    class_pools: Dict[CharacterClass, str]


def build_pools(spec: GenerationSpec) -> CharacterPools:
    """
    Assemble the union pool and the per-class sub-pools for a spec.

    Similar characters are removed before assembly; an enabled class left
    empty by that removal is a configuration error.
    """
    spec.validate()
    class_pools: Dict[CharacterClass, str] = {}
    for cls in CLASS_ORDER:
        if cls not in spec.classes:
            continue
        chars = _canonical_set(cls, spec.symbols)
        # dedupe custom symbol strings so every char is equally likely
        chars = "".join(dict.fromkeys(chars))
        if spec.exclude_similar:
            chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
        if not chars:
            raise ConfigurationError(
                f"excluding similar characters leaves no {cls.value} characters"
            )
        class_pools[cls] = chars

    seen = dict.fromkeys("".join(class_pools.values()))
    return CharacterPools(pool="".join(seen), class_pools=class_pools)


def generate_secret(spec: GenerationSpec) -> str:
    """
    Generate a cryptographically secure string satisfying the spec.
    """
    pools = build_pools(spec)

    password_chars: List[str] = []
    if spec.strict:
        mandatory = list(pools.class_pools.values())
        _sysrand.shuffle(mandatory)
        for p in mandatory:
            password_chars.append(choice(p))

    remaining = spec.length - len(password_chars)
    for _ in range(remaining):
        password_chars.append(choice(pools.pool))

    _sysrand.shuffle(password_chars)
    logger.debug(
        "generated secret length=%d classes=%s strict=%s exclude_similar=%s",
        spec.length,
        sorted(c.value for c in spec.classes),
        spec.strict,
        spec.exclude_similar,
    )
    return "".join(password_chars)


def generate(
    length: int = 20,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_symbols: bool = False,
    use_spaces: bool = False,
    exclude_similar: bool = False,
    strict: bool = True,
    symbols: Optional[str] = None,
) -> str:
    """
    Generate a random password from primitive options.
    """
    spec = GenerationSpec.from_flags(
        length,
        lowercase=use_lower,
        uppercase=use_upper,
        numbers=use_digits,
        symbols=use_symbols,
        spaces=use_spaces,
        exclude_similar=exclude_similar,
        strict=strict,
        symbol_chars=symbols,
    )
    return generate_secret(spec)


def generate_pin(length: int = 6) -> str:
    """Digits-only secret; always strict."""
    spec = GenerationSpec(length=length, classes=frozenset({CharacterClass.DIGIT}), strict=True)
    return generate_secret(spec)
