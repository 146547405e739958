"""Passforge -- password generation and strength analysis.

Core functions for building weighted character pools, sampling passwords
from them, and scoring passwords with heuristic weakness checks.
"""

import enum
import itertools
import logging
import random
import secrets
from typing import NamedTuple

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 12


# ── Errors ─────────────────────────────────────────────────────────────────


class PassforgeError(Exception):
    """Base class for generator failures."""


class InvalidLengthError(PassforgeError, ValueError):
    """Requested password length is negative or not an integer."""


class EmptyPoolError(PassforgeError, ValueError):
    """Sampling was requested from a pool with no entries."""


# ── Character classes ──────────────────────────────────────────────────────

BASIC_SYMBOL_CODES = (
    33, 35, 36, 37, 38, 40, 41, 42, 43, 45, 46, 58, 59, 61, 63, 64, 91, 93, 126,
)


class CharacterClass(enum.Enum):
    LOWERCASE = ((97, 122),)
    UPPERCASE = ((65, 90),)
    DIGIT = ((48, 57),)
    BASIC_SYMBOL = ()
    ALL_SYMBOL = ((33, 47), (58, 64), (91, 96), (123, 126))

    @property
    def ranges(self) -> tuple[tuple[int, int], ...]:
        """Inclusive ASCII ranges; empty for the fixed basic-symbol list."""
        return self.value

    def codes(self) -> list[int]:
        if self is CharacterClass.BASIC_SYMBOL:
            return list(BASIC_SYMBOL_CODES)
        return [code for low, high in self.ranges for code in range(low, high + 1)]


class GenerationOptions(NamedTuple):
    length: int = DEFAULT_LENGTH
    include_upper: bool = False
    include_num: bool = False
    include_basic_symbols: bool = False
    include_all_symbols: bool = False
    weighting: bool = True


# ── Pool building ──────────────────────────────────────────────────────────

MAX_SYMBOL_RATIO = 0.25
MIN_DIGIT_RATIO = 0.30
NUM_LETTERS = 26
NUM_DIGITS = 10


def _pool_size(num_symbols: int, lower: int, upper: int, num: int) -> int:
    return num_symbols + lower * NUM_LETTERS + upper * NUM_LETTERS + num * NUM_DIGITS


def _grow_multipliers(
    num_symbols: int, include_upper: bool, include_num: bool,
) -> tuple[int, int, int]:
    """Return (lower, upper, num) multipliers meeting the ratio targets.

    Letters and digits grow in lock-step until symbols are at most 25% of
    the pool, then digits alone grow until they are at least 30% of it.
    Excluded classes are multiplied by their flag so they stay pinned at 0.
    """
    upper_flag, num_flag = int(include_upper), int(include_num)
    lower, upper, num = 1, upper_flag, num_flag

    goal_total = num_symbols / MAX_SYMBOL_RATIO
    total = _pool_size(num_symbols, lower, upper, num)
    while goal_total > total:
        lower += 1
        upper = (upper + 1) * upper_flag
        num = (num + 1) * num_flag
        total = _pool_size(num_symbols, lower, upper, num)

    if include_num:
        while num * NUM_DIGITS < MIN_DIGIT_RATIO * total:
            num += 1
            total = _pool_size(num_symbols, lower, upper, num)

    return lower, upper, num


def build_character_pool(options: GenerationOptions) -> list[int]:
    """Build the list of character codes a password is sampled from.

    Lowercase letters are always present.  With weighting enabled (the
    default) duplicates are added so that symbols make up at most 25% of the
    pool and digits, when requested, at least 30%.  Basic and full symbol
    sets are added independently, so requesting both counts the shared
    symbols twice.
    """
    if not options.weighting:
        return _build_unweighted_pool(options)

    pool: list[int] = []
    if options.include_basic_symbols:
        pool.extend(CharacterClass.BASIC_SYMBOL.codes())
    if options.include_all_symbols:
        pool.extend(CharacterClass.ALL_SYMBOL.codes())

    num_symbols = len(pool)
    lower, upper, num = _grow_multipliers(
        num_symbols, options.include_upper, options.include_num,
    )
    logger.debug(
        "pool multipliers: symbols=%d lower=%d upper=%d num=%d",
        num_symbols, lower, upper, num,
    )

    pool.extend(CharacterClass.LOWERCASE.codes() * lower)
    if options.include_upper:
        pool.extend(CharacterClass.UPPERCASE.codes() * upper)
    if options.include_num:
        pool.extend(CharacterClass.DIGIT.codes() * num)
    return pool


def _build_unweighted_pool(options: GenerationOptions) -> list[int]:
    # Every requested class once; the full symbol set already holds the basic one.
    pool = CharacterClass.LOWERCASE.codes()
    if options.include_upper:
        pool.extend(CharacterClass.UPPERCASE.codes())
    if options.include_num:
        pool.extend(CharacterClass.DIGIT.codes())
    if options.include_basic_symbols and not options.include_all_symbols:
        pool.extend(CharacterClass.BASIC_SYMBOL.codes())
    if options.include_all_symbols:
        pool.extend(CharacterClass.ALL_SYMBOL.codes())
    return pool


def pool_composition(pool: list[int]) -> dict[str, int]:
    """Count pool entries per character class.

    Returns a dict with keys: lowercase, uppercase, digits, symbols.
    """
    counts = {"lowercase": 0, "uppercase": 0, "digits": 0, "symbols": 0}
    for code in pool:
        ch = chr(code)
        if is_lower(ch):
            counts["lowercase"] += 1
        elif is_upper(ch):
            counts["uppercase"] += 1
        elif is_digit(ch):
            counts["digits"] += 1
        else:
            counts["symbols"] += 1
    return counts


# ── Sampling ───────────────────────────────────────────────────────────────


def sample(pool: list[int], length: int, rng: random.Random | None = None) -> str:
    """Pick *length* characters uniformly, with replacement, from *pool*.

    *rng* defaults to :class:`secrets.SystemRandom`; pass a seeded
    :class:`random.Random` for reproducible output.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidLengthError(f"Password length must be a non-negative integer, got {length!r}")
    if not pool:
        raise EmptyPoolError("Cannot sample from an empty character pool")

    if rng is None:
        rng = secrets.SystemRandom()
    return "".join(chr(pool[rng.randrange(len(pool))]) for _ in range(length))


def generate_password(
    length: int = DEFAULT_LENGTH,
    include_upper: bool = False,
    include_num: bool = False,
    include_basic_symbols: bool = False,
    include_all_symbols: bool = False,
    *,
    weighting: bool = True,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password from the requested character classes."""
    options = GenerationOptions(
        length, include_upper, include_num,
        include_basic_symbols, include_all_symbols, weighting,
    )
    return generate_from_options(options, rng=rng)


def generate_from_options(
    options: GenerationOptions, rng: random.Random | None = None,
) -> str:
    pool = build_character_pool(options)
    return sample(pool, options.length, rng)


# ── Strength analysis ──────────────────────────────────────────────────────

MAX_SCORE = 100
MIN_REPEAT_LENGTH = 3
REPEAT_DEDUCTION = 5
STRONG_PASSWORD_MESSAGE = "Nice! That is a strong password!"


class Weakness(NamedTuple):
    message: str
    deduction: int


def is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_special(ch: str) -> bool:
    return not (is_lower(ch) or is_upper(ch) or is_digit(ch) or ch.isspace())


_CHARACTER_CHECKS = [
    (is_lower, "lowercase character"),
    (is_upper, "uppercase character"),
    (is_digit, "number"),
    (is_special, "special character"),
]


def length_weakness(password: str) -> Weakness | None:
    if len(password) < 5:
        return Weakness("Password is too short", 40)
    if len(password) <= 10:
        return Weakness("Password could be longer", 15)
    return None


def character_type_weakness(password: str, predicate, kind: str) -> Weakness | None:
    """Deduct for a character type that is missing or appears only once."""
    matches = sum(1 for ch in password if predicate(ch))
    if matches == 0:
        return Weakness(f"Include at least one {kind}", 15)
    if matches == 1:
        return Weakness(f"Include more {kind}s", 5)
    return None


def repeat_runs(password: str) -> list[str]:
    """Return maximal runs of one repeated character at least 3 long."""
    runs = ("".join(group) for _, group in itertools.groupby(password))
    return [run for run in runs if len(run) >= MIN_REPEAT_LENGTH]


def repeat_weakness(password: str) -> Weakness | None:
    runs = repeat_runs(password)
    if runs:
        return Weakness("Password has repeating characters", REPEAT_DEDUCTION * len(runs))
    return None


def evaluate_password(password: str) -> list[Weakness]:
    """Run every check against *password* and return the findings, in order.

    Checks that pass produce nothing; an empty password produces nothing.
    """
    if not password:
        return []

    findings = [length_weakness(password)]
    findings.extend(
        character_type_weakness(password, predicate, kind)
        for predicate, kind in _CHARACTER_CHECKS
    )
    findings.append(repeat_weakness(password))
    return [w for w in findings if w is not None]


def aggregate(weaknesses: list[Weakness], password: str) -> dict:
    """Reduce findings to a report dict with keys: score, messages.

    The score starts at 100 and is not clamped, so very weak passwords can
    go below zero.
    """
    score = MAX_SCORE
    messages: list[str] = []
    for w in weaknesses:
        score -= w.deduction
        messages.append(w.message)

    if not weaknesses and password:
        messages.append(STRONG_PASSWORD_MESSAGE)

    return {"score": score, "messages": messages}


def analyze_password(password: str) -> dict:
    """Analyse password strength and return {"score": int, "messages": list[str]}."""
    return aggregate(evaluate_password(password), password)


def clamp_score(score: int) -> int:
    """Clamp a raw score into 0-100 for meters and progress bars."""
    return max(0, min(MAX_SCORE, score))
