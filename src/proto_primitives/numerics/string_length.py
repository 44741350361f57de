"""
StringLength / StringLengthRange — Длина строки и диапазон длин

StringLength: целое в [0, INT32_MAX].
StringLengthRange: пара (min, max) с инвариантом min <= max.
"""

from dataclasses import FrozenInstanceError
from typing import Any, ClassVar, Dict, Final

from proto_primitives.core import arguments
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.validated_value import ValidatedValue
from proto_primitives.numerics.integers import INT32_MAX


DEFAULT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("'raw_value' must be zero or positive.")


def validate_string_length(raw_value: int, error_message: ErrorMessage) -> int:
    arguments.of_type(raw_value, int, "raw_value", error_message.text)
    arguments.less_than_or_equal_to(raw_value, INT32_MAX, "raw_value", error_message.text)
    return arguments.greater_than_or_equal_to(raw_value, 0, "raw_value", error_message.text)


class StringLength(ValidatedValue[int]):
    """
    Допустимая длина строки: от 0 до INT32_MAX включительно.

    Attributes:
        MIN: StringLength(0)
        MAX: StringLength(INT32_MAX)
    """

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = DEFAULT_ERROR_MESSAGE
    MIN: ClassVar["StringLength"]
    MAX: ClassVar["StringLength"]

    def __init__(self, raw_value: int, error_message: ErrorMessage = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(raw_value, error_message, validate_string_length)


StringLength.MIN = StringLength(0)
StringLength.MAX = StringLength(INT32_MAX)


class StringLengthRange:
    """
    Диапазон длин строки (обе границы включительно).

    Args:
        min_length: Нижняя граница, может быть равна max_length
        max_length: Верхняя граница, может быть равна min_length

    Raises:
        MissingArgumentError: Если любая граница равна None
        OutOfRangeError: Если min_length > max_length
    """

    __slots__ = ("_min", "_max")

    def __init__(self, min_length: StringLength, max_length: StringLength) -> None:
        self.validate(min_length, max_length)
        object.__setattr__(self, "_min", min_length)
        object.__setattr__(self, "_max", max_length)

    @property
    def min(self) -> StringLength:
        return self._min

    @property
    def max(self) -> StringLength:
        return self._max

    @staticmethod
    def validate(min_length: StringLength, max_length: StringLength) -> None:
        """
        Проверка границ без создания экземпляра.

        Используется также ConfigurableStringBuilder при build() с
        эффективными значениями по умолчанию (MIN..MAX).
        """
        arguments.not_none(min_length, "min_length")
        arguments.not_none(max_length, "max_length")
        arguments.less_than_or_equal_to(
            min_length,
            max_length,
            "min_length",
            f"min must be less than or equals to (<=) max ({max_length}).",
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __copy__(self) -> "StringLengthRange":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "StringLengthRange":
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringLengthRange):
            return NotImplemented
        return self._min == other.min and self._max == other.max

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"StringLengthRange(min={self._min.value}, max={self._max.value})"
