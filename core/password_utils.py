# core/password_utils.py
from __future__ import annotations
import secrets
from dataclasses import dataclass, field
from enum import Enum
from typing import List, MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")

# ==== Length limits ====
MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = 12

# Characters often confused on paper / screen
AMBIGUOUS = frozenset("1lI0Oo")


class CharacterClass(Enum):
    # declaration order is the canonical pool order
    UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWER = "abcdefghijklmnopqrstuvwxyz"
    DIGIT = "0123456789"
    SYMBOL = "!@#$%^&*()-_=+[]{};:,.?/"

    @property
    def alphabet(self) -> str:
        return self.value


class Tier(Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"

    @property
    def level(self) -> int:
        return {Tier.WEAK: 1, Tier.MEDIUM: 2, Tier.STRONG: 3}[self]


class RandomSourceError(RuntimeError):
    """The secure random source could not produce a value."""


# =========================
# Configuration
# =========================
@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULT_LENGTH
    classes: frozenset = field(
        default_factory=lambda: frozenset(
            {CharacterClass.UPPER, CharacterClass.LOWER, CharacterClass.DIGIT}
        )
    )
    easy_to_read: bool = True

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        use_upper: bool = True,
        use_lower: bool = True,
        use_digits: bool = True,
        use_symbols: bool = False,
        easy_to_read: bool = True,
    ) -> "GenerationConfig":
        flags = {
            CharacterClass.UPPER: use_upper,
            CharacterClass.LOWER: use_lower,
            CharacterClass.DIGIT: use_digits,
            CharacterClass.SYMBOL: use_symbols,
        }
        return cls(
            length=int(length),
            classes=frozenset(c for c, on in flags.items() if on),
            easy_to_read=bool(easy_to_read),
        )

    def uses(self, cls_: CharacterClass) -> bool:
        return cls_ in self.classes

    @property
    def pools_count(self) -> int:
        return len(self.classes)

    @property
    def has_symbols(self) -> bool:
        return CharacterClass.SYMBOL in self.classes

    @property
    def effective_min_length(self) -> int:
        """Smallest length that still leaves room for one char per category."""
        return max(MIN_LENGTH, self.pools_count)

    @property
    def can_generate(self) -> bool:
        return self.pools_count > 0 and self.length >= self.effective_min_length


# =========================
# Secure random source
# =========================
class RandomSource(Protocol):
    def next_uint32(self) -> int: ...


class SecureRandomSource:
    """32-bit words from the OS CSPRNG (via `secrets`)."""

    def next_uint32(self) -> int:
        try:
            return secrets.randbits(32)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Secure random source failed: {e}") from e


_DEFAULT_SOURCE = SecureRandomSource()


def random_below(bound: int, source: Optional[RandomSource] = None) -> int:
    """Uniform-ish int in [0, bound) by modulo reduction of a 32-bit word."""
    if bound <= 0:
        return 0
    src = source or _DEFAULT_SOURCE
    return src.next_uint32() % bound


def shuffle(items: MutableSequence[T], source: Optional[RandomSource] = None) -> List[T]:
    """Fisher-Yates on a copy; every swap index comes from the secure source."""
    a = list(items)
    for i in range(len(a) - 1, 0, -1):
        j = random_below(i + 1, source)
        a[i], a[j] = a[j], a[i]
    return a


# =========================
# Pools & generation
# =========================
def sanitize_charset(chars: str, easy_to_read: bool) -> str:
    if not easy_to_read:
        return chars
    return "".join(ch for ch in chars if ch not in AMBIGUOUS)


def build_pools(config: GenerationConfig) -> List[str]:
    """
    Returns one pool per enabled category, in canonical order.
      - easy_to_read strips AMBIGUOUS characters (order preserved)
      - pools left empty by the filter are dropped
    """
    pools: List[str] = []
    for cls_ in CharacterClass:
        if cls_ in config.classes:
            pool = sanitize_charset(cls_.alphabet, config.easy_to_read)
            if pool:
                pools.append(pool)
    return pools


def generate(
    length: int,
    config: GenerationConfig,
    source: Optional[RandomSource] = None,
) -> str:
    """
    Generate a password of 'length' with at least 1 char from each pool.
    Returns "" when no category is enabled.
    """
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}.")

    pools = build_pools(config)
    if not pools:
        return ""
    if length < len(pools):
        raise ValueError(f"Length ({length}) is too short for {len(pools)} required groups.")

    required = [pool[random_below(len(pool), source)] for pool in pools]  # guarantee coverage
    combined = "".join(pools)
    filler = [combined[random_below(len(combined), source)] for _ in range(length - len(pools))]

    # required chars would otherwise always sit in the first positions
    return "".join(shuffle(required + filler, source))


# =========================
# Strength heuristic
# =========================
@dataclass(frozen=True)
class StrengthResult:
    score: int
    tier: Tier

    @property
    def label(self) -> str:
        return self.tier.value


def _clamp(lo: int, hi: int, v: int) -> int:
    return max(lo, min(hi, v))


def strength_breakdown(length: int, pools_count: int, has_symbols: bool) -> dict:
    return {
        "length": _clamp(0, 60, (length - 6) * 6),
        "variety": pools_count * 12,
        "symbols": 10 if has_symbols else 0,
    }


def estimate_strength(length: int, pools_count: int, has_symbols: bool) -> StrengthResult:
    """Explainable score for a configuration; not an entropy estimate."""
    score = _clamp(0, 100, sum(strength_breakdown(length, pools_count, has_symbols).values()))
    if score < 45:
        return StrengthResult(score, Tier.WEAK)
    if score < 75:
        return StrengthResult(score, Tier.MEDIUM)
    return StrengthResult(score, Tier.STRONG)


# =========================
# Helpers for callers
# =========================
def validation_message(config: GenerationConfig) -> str:
    if config.pools_count == 0:
        return "Select at least one character set."
    if config.length < config.effective_min_length:
        return f"Length must be at least {config.effective_min_length} for the selected options."
    return ""


def clamp_length(length: int, config: GenerationConfig) -> int:
    return max(config.effective_min_length, min(MAX_LENGTH, int(length)))
