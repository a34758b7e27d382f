"""Tests for string-comparison metrics"""

import pytest

from gauge_eval.domain.value_objects import MetricInput
from gauge_eval.scoring.string_metrics import (
    Contains,
    ContainsAll,
    ContainsAny,
    EndsWith,
    Equals,
    LengthBetween,
    NoOffensiveLanguage,
    NotEmpty,
    StartsWith,
    WordCount,
)


def pair(output, expected=""):
    return MetricInput(output=output, expected=expected)


class TestEquals:
    def test_match(self):
        result = Equals().score(pair("Hello", "hello"))
        assert result.value == 1.0
        assert result.reason == "exact match"

    def test_case_sensitive_mismatch(self):
        result = Equals(case_sensitive=True).score(pair("Hello", "hello"))
        assert result.value == 0.0
        assert result.reason == "no match"


class TestContains:
    def test_contains(self):
        assert Contains().score(pair("say Hello world", "hello")).value == 1.0

    def test_not_contains(self):
        assert Contains().score(pair("goodbye", "hello")).value == 0.0


class TestStartsEndsWith:
    def test_starts_with(self):
        assert StartsWith().score(pair("Answer: 42", "answer")).value == 1.0
        assert StartsWith().score(pair("The answer", "answer")).value == 0.0

    def test_ends_with(self):
        assert EndsWith().score(pair("the end.", "END.")).value == 1.0
        assert EndsWith(case_sensitive=True).score(pair("the end.", "END.")).value == 0.0


class TestContainsAny:
    def test_any_found(self):
        result = ContainsAny(["cat", "Dog"]).score(pair("I have a dog"))
        assert result.value == 1.0
        assert result.reason == "contains: Dog"

    def test_none_found(self):
        assert ContainsAny(["cat", "dog"]).score(pair("fish")).value == 0.0


class TestContainsAll:
    def test_all_found(self):
        assert ContainsAll(["a", "b"]).score(pair("a and b")).value == 1.0

    def test_partial_credit(self):
        result = ContainsAll(["red", "green", "blue", "black"]).score(pair("red and blue"))
        assert result.value == pytest.approx(0.5)
        assert result.reason == "missing: green, black"


class TestNotEmpty:
    def test_not_empty(self):
        assert NotEmpty().score(pair("x")).value == 1.0

    def test_whitespace_is_empty(self):
        result = NotEmpty().score(pair("  \n\t"))
        assert result.value == 0.0
        assert result.reason == "output is empty"


class TestLengthBetween:
    def test_within(self):
        assert LengthBetween(1, 5).score(pair("abc")).value == 1.0

    def test_counts_characters(self):
        assert LengthBetween(4, 4).score(pair("café")).value == 1.0

    def test_out_of_range(self):
        result = LengthBetween(1, 2).score(pair("abcd"))
        assert result.value == 0.0
        assert result.reason == "length out of range: 4"


class TestWordCount:
    def test_within(self):
        assert WordCount(2, 3).score(pair("one two three")).value == 1.0

    def test_out_of_range(self):
        assert WordCount(2, 3).score(pair("one")).value == 0.0


class TestNoOffensiveLanguage:
    def test_clean(self):
        assert NoOffensiveLanguage(["darn"]).score(pair("all good")).value == 1.0

    def test_detects_case_insensitively(self):
        assert NoOffensiveLanguage(["darn"]).score(pair("DARN it")).value == 0.0


class TestExpectedComparisonBase:
    def test_predicate_is_abstract(self):
        from gauge_eval.scoring.string_metrics import _ExpectedComparison

        with pytest.raises(TypeError):
            _ExpectedComparison("bare")
