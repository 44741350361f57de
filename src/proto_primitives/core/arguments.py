"""
Arguments — Guard-функции для проверки аргументов

Каждая функция проверяет ОДНО условие и либо возвращает исходное значение,
либо немедленно бросает типизированную ошибку из proto_primitives.errors.
Возврат значения позволяет использовать guard прямо в выражении:

    self._min_length = arguments.not_none(min_length, "min_length")

Текст ошибки начинается с переданного message; если message не передан,
используется нейтральный текст с именем параметра.
"""

from typing import Any, Optional, Tuple, Type, TypeVar, Union

from proto_primitives.errors import (
    InvalidFormatError,
    InvalidTypeError,
    MissingArgumentError,
    OutOfRangeError,
)

T = TypeVar("T")


# =============================================================================
# NONE / TYPE
# =============================================================================


def not_none(value: Optional[T], param_name: str, message: Optional[str] = None) -> T:
    """
    Проверка, что аргумент передан.

    Raises:
        MissingArgumentError: Если value is None
    """
    if value is None:
        raise MissingArgumentError(message or "Value cannot be None.", param_name)
    return value


def of_type(
    value: Any,
    expected: Union[Type[Any], Tuple[Type[Any], ...]],
    param_name: str,
    message: Optional[str] = None,
) -> Any:
    """
    Проверка типа аргумента.

    bool никогда не считается int: True/False не являются числами в домене.

    Raises:
        InvalidTypeError: Если value не является экземпляром expected
    """
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    is_bool_as_int = isinstance(value, bool) and bool not in expected_types
    if is_bool_as_int or not isinstance(value, expected_types):
        names = ", ".join(t.__name__ for t in expected_types)
        raise InvalidTypeError(
            message or f"Expected {names}, got {type(value).__name__}.", param_name
        )
    return value


# =============================================================================
# RANGE
# =============================================================================


def greater_than(value: T, bound: Any, param_name: str, message: Optional[str] = None) -> T:
    """value > bound, иначе OutOfRangeError."""
    if not value > bound:
        raise OutOfRangeError(
            message or f"'{param_name}' must be greater than {bound}.", param_name, value
        )
    return value


def greater_than_or_equal_to(
    value: T, bound: Any, param_name: str, message: Optional[str] = None
) -> T:
    """value >= bound, иначе OutOfRangeError."""
    if not value >= bound:
        raise OutOfRangeError(
            message or f"'{param_name}' must be greater than or equal to {bound}.",
            param_name,
            value,
        )
    return value


def less_than(value: T, bound: Any, param_name: str, message: Optional[str] = None) -> T:
    """value < bound, иначе OutOfRangeError."""
    if not value < bound:
        raise OutOfRangeError(
            message or f"'{param_name}' must be less than {bound}.", param_name, value
        )
    return value


def less_than_or_equal_to(
    value: T, bound: Any, param_name: str, message: Optional[str] = None
) -> T:
    """value <= bound, иначе OutOfRangeError."""
    if not value <= bound:
        raise OutOfRangeError(
            message or f"'{param_name}' must be less than or equal to {bound}.",
            param_name,
            value,
        )
    return value


def between(
    value: int, lower: int, upper: int, param_name: str, message: Optional[str] = None
) -> int:
    """lower <= value <= upper (включительно), иначе OutOfRangeError."""
    if not lower <= value <= upper:
        raise OutOfRangeError(
            message or f"'{param_name}' must be between {lower} and {upper}.",
            param_name,
            value,
        )
    return value


# =============================================================================
# STRINGS
# =============================================================================


def not_empty_or_whitespace_only(
    value: Optional[str], param_name: str, message: Optional[str] = None
) -> str:
    """
    Проверка, что строка передана и содержит хотя бы один не-пробельный символ.

    Raises:
        MissingArgumentError: Если value is None
        InvalidTypeError: Если value не str
        InvalidFormatError: Если строка пустая или состоит только из пробелов
    """
    not_none(value, param_name, message)
    of_type(value, str, param_name, message)
    if not value.strip():
        raise InvalidFormatError(
            message or f"'{param_name}' can not be empty or white space only.", param_name
        )
    return value
