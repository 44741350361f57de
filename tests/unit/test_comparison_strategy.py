"""
Тесты ComparisonStrategy и предикатов пробелов
"""

import locale

import pytest

from proto_primitives.strings import ComparisonStrategy
from proto_primitives.strings.whitespace import (
    has_leading_whitespace,
    has_trailing_whitespace,
    is_not_trimmed,
    is_whitespace_only,
)


class TestComparisonStrategy:
    """Ключи и операции сравнения"""

    def test_flags(self) -> None:
        assert not ComparisonStrategy.ORDINAL.ignores_case
        assert ComparisonStrategy.ORDINAL_IGNORE_CASE.ignores_case
        assert ComparisonStrategy.CULTURE.is_culture_aware
        assert ComparisonStrategy.CULTURE_IGNORE_CASE.ignores_case
        assert ComparisonStrategy.CULTURE_IGNORE_CASE.is_culture_aware

    def test_ordinal_is_case_sensitive(self) -> None:
        strategy = ComparisonStrategy.ORDINAL
        assert not strategy.equals("abc", "ABC")
        assert strategy.compare("B", "a") < 0
        assert strategy.compare("a", "a") == 0

    def test_ordinal_ignore_case(self) -> None:
        strategy = ComparisonStrategy.ORDINAL_IGNORE_CASE
        assert strategy.equals("straße", "STRAßE")
        assert strategy.compare("abc", "ABC") == 0
        assert strategy.hash("abc") == strategy.hash("ABC")

    def test_ordinal_ignore_case_maps_single_characters_only(self) -> None:
        """Посимвольное отображение: ß не расширяется до SS"""
        strategy = ComparisonStrategy.ORDINAL_IGNORE_CASE
        assert not strategy.equals("Straße", "STRASSE")
        assert strategy.key("straße") == "STRAßE"
        assert strategy.equals("ǆ", "Ǆ")

    def test_culture_key_uses_strxfrm(self) -> None:
        assert ComparisonStrategy.CULTURE.key("abc") == locale.strxfrm("abc")

    def test_culture_ignore_case(self) -> None:
        strategy = ComparisonStrategy.CULTURE_IGNORE_CASE
        assert strategy.equals("Hello", "hELLO")
        assert strategy.hash("Hello") == strategy.hash("hello")

    @pytest.mark.parametrize("strategy", list(ComparisonStrategy))
    def test_compare_is_antisymmetric(self, strategy: ComparisonStrategy) -> None:
        assert strategy.compare("a", "b") == -strategy.compare("b", "a")

    def test_lookup_by_name(self) -> None:
        assert ComparisonStrategy("ORDINAL_IGNORE_CASE") is ComparisonStrategy.ORDINAL_IGNORE_CASE


class TestWhitespacePredicates:
    """Пробел — по str.isspace()"""

    @pytest.mark.parametrize("value,expected", [("", True), ("   ", True), ("\t\n", True), (" a ", False)])
    def test_is_whitespace_only(self, value: str, expected: bool) -> None:
        assert is_whitespace_only(value) is expected

    def test_leading_trailing(self) -> None:
        assert has_leading_whitespace(" a")
        assert not has_leading_whitespace("a ")
        assert has_trailing_whitespace("a\t")
        assert not has_trailing_whitespace(" a")
        assert not has_leading_whitespace("")
        assert not has_trailing_whitespace("")

    def test_is_not_trimmed(self) -> None:
        assert is_not_trimmed(" a")
        assert is_not_trimmed("a ")
        assert not is_not_trimmed("a b")
        assert not is_not_trimmed("")
