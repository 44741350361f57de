"""
RelationalOperators — Общая логика сравнения и равенства

Единая реализация операторов (==, !=, <, <=, >, >=) для всех domain primitives.
Ни один конкретный тип не дублирует null-логику: каждый реализует только
compare_to/equals через compare()/equal(), а операторы получает из
RelationalOperatorsMixin.

Порядок с None (None — уникальный минимум):
    compare(x, None)  > 0          x <  None → False      None <  x → True
    compare(x, x)    == 0          x <= None → False      None <= x → True
    None == None → True            x >  None → True       None >  x → False
    x == None    → False           x >= None → True       None >= x → False
                                   None > None → False    None >= None → True

Сравнения никогда не бросают исключений на None-операндах.
"""

from typing import Any, Callable, Optional, Protocol, TypeVar

from proto_primitives.core import arguments


class Comparable(Protocol):
    """Тип с методами compare_to/equals, на которых строятся операторы."""

    def compare_to(self, other: Any) -> int: ...

    def equals(self, other: Any) -> bool: ...


C = TypeVar("C", bound=Comparable)


# =============================================================================
# SELF vs OTHER
# =============================================================================


def compare(self: C, other: Optional[C], comparator: Callable[[C], int]) -> int:
    """
    Обобщённый compare_to.

    Перед вызовом comparator проверяет None и ссылочное равенство.

    Args:
        self: Получатель compare_to, не может быть None
        other: Аргумент compare_to, может быть None
        comparator: Функция сравнения по значению, получает other (не None)

    Returns:
        1 если other is None, 0 если other is self, иначе comparator(other)

    Raises:
        MissingArgumentError: Если self или comparator равны None
    """
    arguments.not_none(self, "self")
    arguments.not_none(comparator, "comparator")

    if other is None:
        return 1
    return 0 if other is self else comparator(other)


def equal(self: C, other: Optional[C], comparator: Callable[[C], bool]) -> bool:
    """
    Обобщённый equals.

    Returns:
        False если other is None, True если other is self, иначе comparator(other)

    Raises:
        MissingArgumentError: Если self или comparator равны None
    """
    arguments.not_none(self, "self")
    arguments.not_none(comparator, "comparator")

    return other is not None and (other is self or comparator(other))


# =============================================================================
# OPERATORS (left, right)
# =============================================================================


def equals_operator(left: Optional[C], right: Optional[C]) -> bool:
    """==: оба None → True, иначе left.equals(right)."""
    return right is None if left is None else left.equals(right)


def not_equals_operator(left: Optional[C], right: Optional[C]) -> bool:
    """!=: отрицание equals_operator."""
    return not equals_operator(left, right)


def less_than(left: Optional[C], right: Optional[C]) -> bool:
    """<: None меньше любого не-None значения."""
    return right is not None if left is None else left.compare_to(right) < 0


def less_or_equal(left: Optional[C], right: Optional[C]) -> bool:
    """<=: None меньше или равен чему угодно, включая None."""
    return left is None or left.compare_to(right) <= 0


def greater_than(left: Optional[C], right: Optional[C]) -> bool:
    """>: None никогда не больше; любое не-None больше None."""
    if left is None:
        return False
    if right is None:
        return True
    return left.compare_to(right) > 0


def greater_or_equal(left: Optional[C], right: Optional[C]) -> bool:
    """>=: всё больше или равно None; None не больше-или-равно не-None."""
    if right is None:
        return True
    if left is None:
        return False
    return left.compare_to(right) >= 0


# =============================================================================
# MIXIN
# =============================================================================


class RelationalOperatorsMixin:
    """
    Операторы сравнения поверх compare_to/equals.

    Подкласс реализует compare_to, equals, __hash__ и при необходимости
    _is_comparable_with (по умолчанию — тот же конкретный тип). Для
    несравнимых объектов операторы порядка возвращают NotImplemented,
    и Python бросает TypeError.

    None справа обрабатывается напрямую. None слева Python приводит к
    отражённому оператору: `None < x` вызывает `x.__gt__(None)`, что даёт
    ту же таблицу порядка.
    """

    __slots__ = ()

    def compare_to(self, other: Any) -> int:
        raise NotImplementedError

    def equals(self, other: Any) -> bool:
        raise NotImplementedError

    def _is_comparable_with(self, other: Any) -> bool:
        return isinstance(other, type(self))

    def __eq__(self, other: object) -> bool:
        return equals_operator(self, other)

    def __ne__(self, other: object) -> bool:
        return not_equals_operator(self, other)

    def __lt__(self, other: Any) -> bool:
        if other is not None and not self._is_comparable_with(other):
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other: Any) -> bool:
        if other is not None and not self._is_comparable_with(other):
            return NotImplemented
        return less_or_equal(self, other)

    def __gt__(self, other: Any) -> bool:
        if other is not None and not self._is_comparable_with(other):
            return NotImplemented
        return greater_than(self, other)

    def __ge__(self, other: Any) -> bool:
        if other is not None and not self._is_comparable_with(other):
            return NotImplemented
        return greater_or_equal(self, other)
