"""
ValidatedValue — Базовый immutable wrapper для domain primitives

Оборачивает raw-значение (int, str, datetime, ...) и гарантирует, что оно
прошло validator ровно один раз, при создании. После __init__ экземпляр
либо полностью валиден, либо не существует.

Равенство, порядок, хэш и строковое представление выводятся из wrapped value:
    - equals: тот же конкретный тип И равные значения
    - compare_to: None < всё; self == self; иначе порядок значений
    - hash: hash(value)
    - str: str(value)

Validator — чистая функция (raw, message) -> raw. Конкретный тип передаёт
свою функцию в конструктор, поведение не наследуется.
"""

import logging
from dataclasses import FrozenInstanceError
from typing import Any, Callable, Dict, Generic, TypeVar

from proto_primitives.core import arguments, relational
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.relational import RelationalOperatorsMixin
from proto_primitives.errors import InvalidTypeError, ValidatorContractError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Validator = Callable[[T, ErrorMessage], T]


class ValidatedValue(RelationalOperatorsMixin, Generic[T]):
    """
    Обобщённый domain primitive поверх wrapped value типа T.

    T должен поддерживать ==, < и hash.

    Args:
        raw_value: Значение для обёртки, не None
        error_message: Сообщение для ошибок validator, не None
        validator: Функция проверки, не None. Возвращает raw_value (или
            производное значение) либо бросает OutOfRangeError/InvalidFormatError

    Raises:
        MissingArgumentError: Если любой аргумент равен None
        InvalidTypeError: Если validator не callable или error_message не ErrorMessage
        ValidatorContractError: Если validator вернул None
    """

    __slots__ = ("_value",)

    def __init__(self, raw_value: T, error_message: ErrorMessage, validator: Validator[T]) -> None:
        arguments.not_none(validator, "validator")
        if not callable(validator):
            raise InvalidTypeError("validator must be callable.", "validator")
        arguments.not_none(error_message, "error_message")
        arguments.of_type(error_message, ErrorMessage, "error_message")
        arguments.not_none(raw_value, "raw_value", error_message.text)

        validated = validator(raw_value, error_message)
        if validated is None:
            logger.error(
                "Validator %r of %s returned None", validator, type(self).__name__
            )
            raise ValidatorContractError(
                f"Validator of {type(self).__name__} returned None instead of a value."
            )

        object.__setattr__(self, "_value", validated)

    @property
    def value(self) -> T:
        """Wrapped value."""
        return self._value

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    def __copy__(self) -> "ValidatedValue[T]":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ValidatedValue[T]":
        return self

    # -------------------------------------------------------------------------
    # Equality / ordering
    # -------------------------------------------------------------------------

    def _is_comparable_with(self, other: Any) -> bool:
        return isinstance(other, ValidatedValue)

    def equals(self, other: Any) -> bool:
        """True только для того же конкретного типа с равным value."""
        return relational.equal(
            self, other, lambda o: type(o) is type(self) and self._value == o.value
        )

    def compare_to(self, other: Any) -> int:
        """
        Порядок по wrapped value.

        Raises:
            TypeError: Если other не None и не ValidatedValue
        """
        if other is not None and not isinstance(other, ValidatedValue):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return relational.compare(self, other, lambda o: _compare_values(self._value, o.value))

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def _compare_values(left: Any, right: Any) -> int:
    if left < right:
        return -1
    return 1 if right < left else 0
