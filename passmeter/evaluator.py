"""
passmeter.evaluator

Password strength evaluator:
- keyspace_size(password): sum of the sizes of the character classes present
- estimate_entropy(password): length * log2(keyspace)
- strength_category(entropy, is_common): label, common passwords always lose
- seconds_to_crack / format_crack_time: brute-force estimate at a fixed guess rate
- evaluate(password, common_passwords): the full PasswordAnalysis record

Everything here is pure; the common-password set is only read.
"""

import math
import re
from dataclasses import dataclass, asdict
from typing import AbstractSet, Dict, Any, Optional

ATTACK_RATE_PER_SECOND = 10 ** 11
SYMBOL_POOL_SIZE = 32

LOWER_POOL_SIZE = 26
UPPER_POOL_SIZE = 26
DIGIT_POOL_SIZE = 10

WEAK = "Weak or Acceptable"
STRONG = "Strong"
VERY_STRONG = "Very Strong"
COMMON = "Very Weak (Common Password)"

STRONG_BITS = 60
VERY_STRONG_BITS = 80

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class PasswordAnalysis:
    password_length: int
    keyspace_size: int
    entropy_bits: float
    strength_category: str
    is_in_common_list: bool
    estimated_crack_time: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def password_length(password: str) -> int:
    return len(password)


def keyspace_size(password: str, symbol_pool_size: int = SYMBOL_POOL_SIZE) -> int:
    """
    Only ASCII letters and digits count as letters/digits; anything else
    (punctuation, whitespace, accented or non-Latin characters) is a symbol.
    """
    if not password:
        return 0

    pool = 0
    if _LOWER_RE.search(password):
        pool += LOWER_POOL_SIZE
    if _UPPER_RE.search(password):
        pool += UPPER_POOL_SIZE
    if _DIGIT_RE.search(password):
        pool += DIGIT_POOL_SIZE
    if _SYMBOL_RE.search(password):
        pool += symbol_pool_size
    return pool


def entropy_from_keyspace(length: int, pool: int) -> float:
    if length == 0 or pool == 0:
        return 0.0
    return length * math.log2(pool)


def estimate_entropy(password: str, symbol_pool_size: int = SYMBOL_POOL_SIZE) -> float:
    """Entropy bits = length * log2(keyspace size); 0 for an empty password."""
    return entropy_from_keyspace(password_length(password), keyspace_size(password, symbol_pool_size))


def strength_category(entropy: float, is_common: bool = False) -> str:
    if is_common:
        return COMMON
    if entropy < STRONG_BITS:
        return WEAK
    if entropy < VERY_STRONG_BITS:
        return STRONG
    return VERY_STRONG


def seconds_to_crack(entropy: float, attack_rate: float = ATTACK_RATE_PER_SECOND) -> float:
    if entropy <= 0:
        return 0.0
    try:
        combinations = 2.0 ** entropy
    except OverflowError:
        return math.inf
    return combinations / attack_rate


def format_crack_time(seconds: float) -> str:
    """Convert seconds to the coarsest matching human-readable bucket."""
    if seconds < 1:
        return "Instantly"
    years = seconds / SECONDS_PER_YEAR
    if years > 1000:
        return "More than a thousand years"
    if years >= 1:
        return f"Approximately {math.floor(years)} years"
    days = seconds / SECONDS_PER_DAY
    if days >= 1:
        return f"Approximately {math.floor(days)} days"
    hours = seconds / SECONDS_PER_HOUR
    if hours >= 1:
        return f"Approximately {math.floor(hours)} hours"
    minutes = seconds / SECONDS_PER_MINUTE
    if minutes >= 1:
        return f"Approximately {math.floor(minutes)} minutes"
    return f"Approximately {seconds:.2f} seconds"


def evaluate(
    password: str,
    common_passwords: AbstractSet[str],
    attack_rate: Optional[float] = None,
    symbol_pool_size: Optional[int] = None,
) -> PasswordAnalysis:
    """
    Analyse one password against the loaded common-password set.

    Membership is an exact, case-sensitive match. A common password is
    always categorised as COMMON, whatever its entropy.
    """
    if attack_rate is None:
        attack_rate = ATTACK_RATE_PER_SECOND
    if symbol_pool_size is None:
        symbol_pool_size = SYMBOL_POOL_SIZE

    length = password_length(password)
    pool = keyspace_size(password, symbol_pool_size)
    entropy = entropy_from_keyspace(length, pool)
    is_common = password in common_passwords

    return PasswordAnalysis(
        password_length=length,
        keyspace_size=pool,
        entropy_bits=round(entropy, 2),
        strength_category=strength_category(entropy, is_common),
        is_in_common_list=is_common,
        estimated_crack_time=format_crack_time(seconds_to_crack(entropy, attack_rate)),
    )
