"""
ComparisonStrategy — Политика сравнения строк

Определяет равенство, порядок и хэш для ConfigurableString:
    ORDINAL                — по code points
    ORDINAL_IGNORE_CASE    — по code points после посимвольного upper() (без расширения: "ß" != "SS")
    CULTURE                — по locale.strxfrm() текущей LC_COLLATE локали
    CULTURE_IGNORE_CASE    — как CULTURE, после str.casefold()

Все операции сравнения сводятся к key(): две строки равны, если равны их
ключи, и упорядочены так же, как их ключи.
"""

import locale
from enum import Enum


class ComparisonStrategy(str, Enum):
    """Стратегия сравнения строк"""

    ORDINAL = "ORDINAL"
    ORDINAL_IGNORE_CASE = "ORDINAL_IGNORE_CASE"
    CULTURE = "CULTURE"
    CULTURE_IGNORE_CASE = "CULTURE_IGNORE_CASE"

    @property
    def ignores_case(self) -> bool:
        return self in (ComparisonStrategy.ORDINAL_IGNORE_CASE, ComparisonStrategy.CULTURE_IGNORE_CASE)

    @property
    def is_culture_aware(self) -> bool:
        return self in (ComparisonStrategy.CULTURE, ComparisonStrategy.CULTURE_IGNORE_CASE)

    def key(self, value: str) -> str:
        """Ключ сравнения для value."""
        if not self.ignores_case:
            folded = value
        elif self.is_culture_aware:
            folded = value.casefold()
        else:
            folded = _simple_upper(value)
        return locale.strxfrm(folded) if self.is_culture_aware else folded

    def compare(self, left: str, right: str) -> int:
        """-1 / 0 / 1 по ключам."""
        left_key, right_key = self.key(left), self.key(right)
        return (left_key > right_key) - (left_key < right_key)

    def equals(self, left: str, right: str) -> bool:
        return self.key(left) == self.key(right)

    def hash(self, value: str) -> int:
        return hash(self.key(value))


def _simple_upper(value: str) -> str:
    # Однозначное отображение: символ, чей upper() длиннее одного символа, не меняется
    chars = []
    for char in value:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)
