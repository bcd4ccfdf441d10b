"""
passcraft.crack_time

Crack-time estimate backed by zxcvbn's pattern matching (dictionary, l33t,
spatial, repeat, sequence, date) and minimum-guesses search. Times assume an
offline attack against a slow hash at 10,000 guesses per second.
"""

import math
from dataclasses import dataclass

from zxcvbn import zxcvbn

GUESS_RATE = 1e4
SCENARIO = "offline_slow_hashing_1e4_per_second"

# zxcvbn refuses longer inputs
MAX_ESTIMATE_LENGTH = 72


@dataclass(frozen=True)
class CrackTimeEstimate:
    guesses: float
    seconds: float
    display: str

    @property
    def entropy_bits(self) -> float:
        return math.log2(self.guesses) if self.guesses > 0 else 0.0

    def __str__(self) -> str:
        return self.display


def estimate(password: str) -> CrackTimeEstimate:
    if not password:
        return CrackTimeEstimate(guesses=1.0, seconds=1.0 / GUESS_RATE, display="less than a second")
    result = zxcvbn(password[:MAX_ESTIMATE_LENGTH])
    return CrackTimeEstimate(
        guesses=float(result["guesses"]),
        seconds=float(result["crack_times_seconds"][SCENARIO]),
        display=result["crack_times_display"][SCENARIO],
    )


def crack_time(password: str) -> str:
    """Human-readable time to crack, e.g. '3 hours' or 'centuries'."""
    return estimate(password).display
