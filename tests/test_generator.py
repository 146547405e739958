"""Tests for password pool building and sampling."""

import itertools
import random

import pytest

from passforge import (
    BASIC_SYMBOL_CODES,
    MAX_SYMBOL_RATIO,
    MIN_DIGIT_RATIO,
    CharacterClass,
    EmptyPoolError,
    GenerationOptions,
    InvalidLengthError,
    build_character_pool,
    generate_password,
    pool_composition,
    sample,
)

LOWERCASE = list(range(97, 123))

ALL_FLAG_COMBINATIONS = list(itertools.product([False, True], repeat=4))


def _options(upper=False, num=False, basic=False, every=False, weighting=True):
    return GenerationOptions(12, upper, num, basic, every, weighting)


# ── CharacterClass ─────────────────────────────────────────────────────────


class TestCharacterClass:
    def test_basic_symbols_are_fixed_list(self):
        assert CharacterClass.BASIC_SYMBOL.codes() == list(BASIC_SYMBOL_CODES)
        assert len(BASIC_SYMBOL_CODES) == 19

    def test_all_symbols_cover_printable_punctuation(self):
        codes = CharacterClass.ALL_SYMBOL.codes()
        assert len(codes) == 32
        assert all(not chr(c).isalnum() for c in codes)

    def test_letter_and_digit_ranges(self):
        assert CharacterClass.LOWERCASE.codes() == LOWERCASE
        assert CharacterClass.UPPERCASE.codes() == list(range(65, 91))
        assert CharacterClass.DIGIT.codes() == list(range(48, 58))


# ── build_character_pool ───────────────────────────────────────────────────


class TestBuildCharacterPool:
    def test_lowercase_only(self):
        assert build_character_pool(_options()) == LOWERCASE

    def test_deterministic(self):
        opts = _options(upper=True, num=True, basic=True, every=True)
        assert build_character_pool(opts) == build_character_pool(opts)

    def test_all_symbols_with_upper_and_digits(self):
        pool = build_character_pool(_options(upper=True, num=True, every=True))
        assert pool_composition(pool) == {
            "lowercase": 52, "uppercase": 52, "digits": 60, "symbols": 32,
        }
        # symbols come first, then lowercase, uppercase, digits
        assert pool[:32] == CharacterClass.ALL_SYMBOL.codes()
        assert pool[32:58] == LOWERCASE

    def test_all_symbols_lowercase_only(self):
        pool = build_character_pool(_options(every=True))
        assert pool_composition(pool) == {
            "lowercase": 104, "uppercase": 0, "digits": 0, "symbols": 32,
        }

    def test_basic_symbols_lowercase_only(self):
        pool = build_character_pool(_options(basic=True))
        assert len(pool) == 19 + 3 * 26
        assert pool[:19] == list(BASIC_SYMBOL_CODES)

    def test_basic_and_all_symbols_double_count(self):
        pool = build_character_pool(_options(basic=True, every=True))
        assert pool_composition(pool)["symbols"] == 51
        assert pool.count(ord("!")) == 2  # once from each symbol set
        assert pool.count(ord("\\")) == 1

    def test_digits_grow_without_symbols(self):
        pool = build_character_pool(_options(upper=True, num=True))
        assert pool_composition(pool) == {
            "lowercase": 26, "uppercase": 26, "digits": 30, "symbols": 0,
        }

    def test_excluded_classes_stay_out(self):
        pool = build_character_pool(_options(basic=True, every=True))
        counts = pool_composition(pool)
        assert counts["uppercase"] == 0
        assert counts["digits"] == 0

    @pytest.mark.parametrize("upper,num,basic,every", ALL_FLAG_COMBINATIONS)
    def test_symbol_ratio_ceiling(self, upper, num, basic, every):
        counts = pool_composition(build_character_pool(_options(upper, num, basic, every)))
        total = sum(counts.values())
        assert counts["symbols"] <= MAX_SYMBOL_RATIO * total
        assert counts["lowercase"] > 0

    @pytest.mark.parametrize("upper,basic,every", list(itertools.product([False, True], repeat=3)))
    def test_digit_ratio_floor(self, upper, basic, every):
        counts = pool_composition(build_character_pool(_options(upper, True, basic, every)))
        total = sum(counts.values())
        assert counts["digits"] >= MIN_DIGIT_RATIO * total


class TestUnweightedPool:
    def test_each_class_once(self):
        pool = build_character_pool(_options(upper=True, num=True, every=True, weighting=False))
        assert pool_composition(pool) == {
            "lowercase": 26, "uppercase": 26, "digits": 10, "symbols": 32,
        }

    def test_basic_symbols_skipped_when_all_requested(self):
        pool = build_character_pool(_options(basic=True, every=True, weighting=False))
        assert pool == LOWERCASE + CharacterClass.ALL_SYMBOL.codes()

    def test_basic_symbols_alone(self):
        pool = build_character_pool(_options(basic=True, weighting=False))
        assert pool == LOWERCASE + list(BASIC_SYMBOL_CODES)


# ── sample ─────────────────────────────────────────────────────────────────


class TestSample:
    def test_length(self):
        assert len(sample(LOWERCASE, 32)) == 32

    def test_zero_length(self):
        assert sample(LOWERCASE, 0) == ""

    def test_seeded_rng_is_reproducible(self):
        pool = build_character_pool(_options(upper=True, num=True, every=True))
        a = sample(pool, 20, random.Random(7))
        b = sample(pool, 20, random.Random(7))
        assert a == b

    def test_characters_come_from_pool(self):
        pool = [ord("x"), ord("y")]
        assert set(sample(pool, 50, random.Random(1))) <= {"x", "y"}

    def test_single_entry_pool(self):
        assert sample([ord("q")], 5) == "qqqqq"

    @pytest.mark.parametrize("length", [-1, 2.5, "8", None, True])
    def test_invalid_length_raises(self, length):
        with pytest.raises(InvalidLengthError):
            sample(LOWERCASE, length)

    def test_invalid_length_is_value_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            sample(LOWERCASE, -3)

    def test_empty_pool_raises(self):
        with pytest.raises(EmptyPoolError):
            sample([], 4)


# ── generate_password ──────────────────────────────────────────────────────


class TestGeneratePassword:
    def test_default_length(self):
        assert len(generate_password()) == 12

    def test_lowercase_only_by_default(self):
        for _ in range(20):
            assert all("a" <= c <= "z" for c in generate_password(16))

    @pytest.mark.parametrize("upper,num,basic,every", ALL_FLAG_COMBINATIONS)
    def test_characters_within_pool(self, upper, num, basic, every):
        pool = set(build_character_pool(_options(upper, num, basic, every)))
        pwd = generate_password(40, upper, num, basic, every, rng=random.Random(3))
        assert len(pwd) == 40
        assert all(ord(c) in pool for c in pwd)

    def test_no_uppercase_or_digits_unless_requested(self):
        for _ in range(20):
            pwd = generate_password(24, include_basic_symbols=True)
            assert not any(c.isupper() or c.isdigit() for c in pwd)

    def test_unweighted(self):
        pwd = generate_password(30, True, True, weighting=False, rng=random.Random(5))
        assert all(c.isalnum() for c in pwd)

    def test_negative_length_raises(self):
        with pytest.raises(InvalidLengthError):
            generate_password(-1)
