"""
passcraft.vocabulary

Unique-token sampling for passphrases.

SYLLABLES and WORDS are built once at import and never change, so they can be
shared freely between threads.
"""

from secrets import choice, SystemRandom
from typing import Iterable, Iterator, List

from .errors import ConfigurationError, ExhaustionError
from .log import get_logger
from .wordlists import SYLLABLE_TOKENS, WORD_TOKENS

logger = get_logger("vocabulary")

MAX_TOKENS = 256

# below this share of unused tokens, rejection sampling stops and the rest is
# picked directly from the unused candidates
REJECTION_THRESHOLD = 0.5

_sysrand = SystemRandom()


class Vocabulary:
    """Read-only, de-duplicated sequence of tokens."""

    __slots__ = ("_name", "_tokens", "_index")

    def __init__(self, name: str, tokens: Iterable[str]):
        ordered = tuple(dict.fromkeys(tokens))
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_tokens", ordered)
        object.__setattr__(self, "_index", frozenset(ordered))

    def __setattr__(self, key, value):
        raise AttributeError("Vocabulary is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def tokens(self) -> tuple:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, i: int) -> str:
        return self._tokens[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        return f"Vocabulary({self._name!r}, {len(self._tokens)} tokens)"


SYLLABLES = Vocabulary("syllables", SYLLABLE_TOKENS)
WORDS = Vocabulary("words", WORD_TOKENS)


def sample(count: int, vocabulary: Vocabulary) -> List[str]:
    """
    Draw min(count, 256) distinct tokens from vocabulary, in draw order.

    Raises:
        ConfigurationError: count is negative
        ExhaustionError: the vocabulary has fewer tokens than requested
    """
    if count < 0:
        raise ConfigurationError("count must be >= 0")
    target = min(count, MAX_TOKENS)
    size = len(vocabulary)
    if target > size:
        raise ExhaustionError(
            f"requested {target} distinct tokens but the {vocabulary.name} vocabulary has only {size}"
        )

    picked: List[str] = []
    seen = set()
    while len(picked) < target:
        if size - len(seen) < size * REJECTION_THRESHOLD:
            candidates = [t for t in vocabulary if t not in seen]
            picked.extend(_sysrand.sample(candidates, target - len(picked)))
            break
        token = choice(vocabulary.tokens)
        if token in seen:
            continue
        seen.add(token)
        picked.append(token)

    logger.debug("sampled %d tokens from %s", len(picked), vocabulary.name)
    return picked


def generate_passphrase(
    count: int = 4,
    full_words: bool = True,
    separator: str = "-",
    capitalize: bool = False,
    uppercase: bool = False,
) -> str:
    """
    Join `count` distinct words (or syllables) into a passphrase.

    An empty separator joins with a single space. uppercase wins over capitalize.
    """
    tokens = sample(count, WORDS if full_words else SYLLABLES)
    if uppercase:
        tokens = [t.upper() for t in tokens]
    elif capitalize:
        tokens = [t[:1].upper() + t[1:] for t in tokens]
    return (separator or " ").join(tokens)
