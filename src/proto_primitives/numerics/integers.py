"""
Integers — Знаковые целочисленные domain primitives

PositiveInteger / NegativeInteger — 32-битные знаковые значения (> 0 / < 0)
PositiveLong / NegativeLong       — 64-битные знаковые значения (> 0 / < 0)

Python int не ограничен по размеру, поэтому ширина проверяется явно:
значение вне диапазона ширины отклоняется так же, как нарушение знака.
"""

from typing import ClassVar, Final

from proto_primitives.core import arguments
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.validated_value import ValidatedValue


# =============================================================================
# ГРАНИЦЫ ШИРИНЫ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# СООБЩЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

POSITIVE_DEFAULT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("'raw_value' must be positive.")
NEGATIVE_DEFAULT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("'raw_value' must be negative.")

PARAM_NAME: Final[str] = "raw_value"


def _check_width(raw_value: int, lower: int, upper: int, error_message: ErrorMessage) -> int:
    arguments.of_type(raw_value, int, PARAM_NAME, error_message.text)
    return arguments.between(raw_value, lower, upper, PARAM_NAME, error_message.text)


# =============================================================================
# VALIDATORS
# =============================================================================


def validate_positive_int32(raw_value: int, error_message: ErrorMessage) -> int:
    _check_width(raw_value, INT32_MIN, INT32_MAX, error_message)
    return arguments.greater_than(raw_value, 0, PARAM_NAME, error_message.text)


def validate_negative_int32(raw_value: int, error_message: ErrorMessage) -> int:
    _check_width(raw_value, INT32_MIN, INT32_MAX, error_message)
    return arguments.less_than(raw_value, 0, PARAM_NAME, error_message.text)


def validate_positive_int64(raw_value: int, error_message: ErrorMessage) -> int:
    _check_width(raw_value, INT64_MIN, INT64_MAX, error_message)
    return arguments.greater_than(raw_value, 0, PARAM_NAME, error_message.text)


def validate_negative_int64(raw_value: int, error_message: ErrorMessage) -> int:
    _check_width(raw_value, INT64_MIN, INT64_MAX, error_message)
    return arguments.less_than(raw_value, 0, PARAM_NAME, error_message.text)


# =============================================================================
# PRIMITIVES
# =============================================================================


class PositiveInteger(ValidatedValue[int]):
    """
    Положительное 32-битное целое: 0 < value <= INT32_MAX.

    Raises:
        OutOfRangeError: Если raw_value <= 0 или не помещается в 32 бита
        InvalidTypeError: Если raw_value не int (bool не принимается)
        MissingArgumentError: Если raw_value или error_message равны None
    """

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = POSITIVE_DEFAULT_ERROR_MESSAGE

    def __init__(
        self, raw_value: int, error_message: ErrorMessage = POSITIVE_DEFAULT_ERROR_MESSAGE
    ) -> None:
        super().__init__(raw_value, error_message, validate_positive_int32)


class NegativeInteger(ValidatedValue[int]):
    """Отрицательное 32-битное целое: INT32_MIN <= value < 0."""

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = NEGATIVE_DEFAULT_ERROR_MESSAGE

    def __init__(
        self, raw_value: int, error_message: ErrorMessage = NEGATIVE_DEFAULT_ERROR_MESSAGE
    ) -> None:
        super().__init__(raw_value, error_message, validate_negative_int32)


class PositiveLong(ValidatedValue[int]):
    """Положительное 64-битное целое: 0 < value <= INT64_MAX."""

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = POSITIVE_DEFAULT_ERROR_MESSAGE

    def __init__(
        self, raw_value: int, error_message: ErrorMessage = POSITIVE_DEFAULT_ERROR_MESSAGE
    ) -> None:
        super().__init__(raw_value, error_message, validate_positive_int64)


class NegativeLong(ValidatedValue[int]):
    """Отрицательное 64-битное целое: INT64_MIN <= value < 0."""

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = NEGATIVE_DEFAULT_ERROR_MESSAGE

    def __init__(
        self, raw_value: int, error_message: ErrorMessage = NEGATIVE_DEFAULT_ERROR_MESSAGE
    ) -> None:
        super().__init__(raw_value, error_message, validate_negative_int64)
