"""
Tests for short code candidate strategies, sources and the generator retry loop.
"""

import asyncio
import random

import pytest

from shortener_core.exceptions import GenerationExhausted, LookupFailure
from shortener_core.services.reserved_codes import ReservedCodeRegistry
from shortener_core.services.short_code_factory import ShortCodeFactory, ShortCodeStrategyType
from shortener_core.services.short_code_generator import ShortCodeGenerator
from shortener_core.services.short_code_strategies import CompactStrategy, WordPairStrategy
from shortener_core.sources.strategies import RandomTokenSource, WordListSource

from tests.fakes import FailingLookup, ScriptedIdSource, ScriptedLookup, ScriptedWordSource


class TestWordListSource:
    """Test word drawing"""

    def test_draws_exact_count(self):
        source = WordListSource(["alpha", "beta", "gamma"], rng=random.Random(1))
        words = source.draw_words(2)
        assert len(words) == 2
        assert all(w in {"alpha", "beta", "gamma"} for w in words)

    def test_words_are_lowercased_and_blank_lines_skipped(self):
        source = WordListSource(["Alpha", "", "  beta  "])
        assert source.words == ["alpha", "beta"]

    def test_rejects_non_alphabetic_words(self):
        with pytest.raises(ValueError):
            WordListSource(["good", "not-ok"])

    def test_rejects_empty_list(self):
        with pytest.raises(ValueError):
            WordListSource([])

    def test_rejects_non_positive_count(self):
        source = WordListSource(["alpha"])
        with pytest.raises(ValueError):
            source.draw_words(0)

    def test_bundled_word_list_loads(self):
        source = WordListSource.from_file()
        assert len(source.words) > 800
        assert all(w.isalpha() and w.islower() for w in source.words)

    def test_custom_word_list_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("one\ntwo\n", encoding="utf-8")
        source = WordListSource.from_file(str(path))
        assert source.words == ["one", "two"]


class TestRandomTokenSource:
    """Test compact token drawing"""

    def test_token_length_and_charset(self):
        source = RandomTokenSource(length=7)
        for _ in range(50):
            token = source.draw_token()
            assert len(token) == 7
            assert token.isalnum()

    def test_custom_alphabet(self):
        source = RandomTokenSource(length=4, alphabet="ab")
        assert set(source.draw_token()) <= {"a", "b"}

    def test_rejects_bad_configuration(self):
        with pytest.raises(ValueError):
            RandomTokenSource(length=0)
        with pytest.raises(ValueError):
            RandomTokenSource(alphabet="ab-_")


class TestCandidateStrategies:
    """Test candidate shapes"""

    def test_word_pair_has_no_separator(self, word_source):
        assert WordPairStrategy(word_source).candidate() == "testwords"

    def test_compact_uses_token(self, id_source):
        assert CompactStrategy(id_source).candidate() == "abcdefg"


class TestShortCodeGenerator:
    """Test the generate-check-retry loop"""

    def test_compact_code_when_free(self, word_source, id_source):
        generator = ShortCodeGenerator(word_source, id_source, max_attempts=5)
        lookup = ScriptedLookup(default=False)

        code = asyncio.run(generator.generate(lookup, use_random_words=False))

        assert code == "abcdefg"
        assert id_source.calls == 1
        assert word_source.calls == 0
        assert lookup.calls == ["abcdefg"]

    def test_word_pair_is_default(self, word_source, id_source):
        generator = ShortCodeGenerator(word_source, id_source, max_attempts=5)
        lookup = ScriptedLookup(default=False)

        code = asyncio.run(generator.generate(lookup))

        assert code == "testwords"
        assert word_source.calls == 1
        assert id_source.calls == 0

    def test_retries_after_collisions(self, word_source):
        id_source = ScriptedIdSource(["taken01", "taken02", "taken03", "free004"])
        generator = ShortCodeGenerator(word_source, id_source, max_attempts=10)
        lookup = ScriptedLookup(results=[True, True, True], default=False)

        code = asyncio.run(generator.generate(lookup, use_random_words=False))

        assert code == "free004"
        # N collisions -> N + 1 lookups
        assert len(lookup.calls) == 4
        assert lookup.calls == ["taken01", "taken02", "taken03", "free004"]

    def test_reserved_candidate_skipped_without_lookup(self, id_source):
        word_source = ScriptedWordSource([["ad", "min"], ["test", "words"]])
        reserved = ReservedCodeRegistry(["admin"])
        generator = ShortCodeGenerator(word_source, id_source, reserved=reserved, max_attempts=5)
        lookup = ScriptedLookup(default=False)

        code = asyncio.run(generator.generate(lookup))

        assert code == "testwords"
        assert lookup.calls == ["testwords"]

    def test_exhaustion_raises_after_max_attempts(self, word_source, id_source):
        generator = ShortCodeGenerator(word_source, id_source, max_attempts=4)
        lookup = ScriptedLookup(default=True)

        with pytest.raises(GenerationExhausted) as exc_info:
            asyncio.run(generator.generate(lookup, use_random_words=False))

        assert exc_info.value.attempts == 4
        assert exc_info.value.strategy == "compact"
        assert len(lookup.calls) == 4
        assert id_source.calls == 4

    def test_all_reserved_exhausts(self, id_source):
        word_source = ScriptedWordSource([["ad", "min"]])
        reserved = ReservedCodeRegistry(["admin"])
        generator = ShortCodeGenerator(word_source, id_source, reserved=reserved, max_attempts=3)
        lookup = ScriptedLookup(default=False)

        with pytest.raises(GenerationExhausted):
            asyncio.run(generator.generate(lookup))
        assert lookup.calls == []

    def test_lookup_failure_propagates(self, word_source, id_source):
        generator = ShortCodeGenerator(word_source, id_source, max_attempts=5)
        lookup = FailingLookup(LookupFailure("abcdefg", "connection refused"))

        with pytest.raises(LookupFailure):
            asyncio.run(generator.generate(lookup, use_random_words=False))

        # Not retried: one failing check ends the call
        assert lookup.calls == 1

    def test_rejects_non_positive_max_attempts(self, word_source, id_source):
        with pytest.raises(ValueError):
            ShortCodeGenerator(word_source, id_source, max_attempts=0)

    def test_concurrent_calls_are_independent(self):
        generator = ShortCodeGenerator(
            WordListSource(["alpha", "beta"]),
            RandomTokenSource(length=7),
            max_attempts=5
        )

        async def run_many():
            lookups = [ScriptedLookup(default=False) for _ in range(10)]
            codes = await asyncio.gather(
                *(generator.generate(lookup, use_random_words=False) for lookup in lookups)
            )
            return codes, lookups

        codes, lookups = asyncio.run(run_many())

        assert len(codes) == 10
        assert all(len(lookup.calls) == 1 for lookup in lookups)


class TestShortCodeFactory:
    """Test generator factory"""

    def setup_method(self):
        ShortCodeFactory.clear_instance()

    def teardown_method(self):
        ShortCodeFactory.clear_instance()

    def test_creates_generator_from_settings(self):
        generator = ShortCodeFactory.create_generator()
        assert isinstance(generator, ShortCodeGenerator)
        assert generator.reserved.is_reserved("admin")

    def test_generator_is_cached(self):
        assert ShortCodeFactory.create_generator() is ShortCodeFactory.create_generator()

    def test_strategy_type_maps_to_flag(self):
        assert ShortCodeFactory.use_random_words(ShortCodeStrategyType.WORDS) is True
        assert ShortCodeFactory.use_random_words(ShortCodeStrategyType.COMPACT) is False

    def test_generated_codes_have_expected_shape(self):
        generator = ShortCodeFactory.create_generator()
        lookup = ScriptedLookup(default=False)

        word_code = asyncio.run(generator.generate(lookup))
        compact_code = asyncio.run(generator.generate(lookup, use_random_words=False))

        assert word_code.isalpha() and word_code.islower()
        assert len(compact_code) == 7
        assert compact_code.isalnum()
