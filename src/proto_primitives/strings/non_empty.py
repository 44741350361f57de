"""
NonEmptyOrWhiteSpaceString — Непустая строка, не состоящая из одних пробелов

Тонкая обёртка над ConfigurableString: min_length=1, строка из пробелов
запрещена, сравнение ORDINAL. Пустая строка отклоняется проверкой длины
(OutOfRangeError) раньше, чем проверкой пробелов (InvalidFormatError).
"""

from dataclasses import FrozenInstanceError
from typing import Any, ClassVar, Dict, Final

from proto_primitives.core import arguments, relational
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.relational import RelationalOperatorsMixin
from proto_primitives.errors import InvalidFormatError
from proto_primitives.numerics.string_length import StringLength
from proto_primitives.strings.comparison import ComparisonStrategy
from proto_primitives.strings.configurable_string import (
    ConfigurableString,
    ConfigurableStringBuilder,
)

DEFAULT_ERROR_MESSAGE: Final[str] = "'raw_value' can not be empty or white space only."
INVALID_CUSTOM_ERROR_MESSAGE_MESSAGE: Final[str] = (
    "'error_message' could not be null, empty or white-space only."
)


class NonEmptyOrWhiteSpaceString(RelationalOperatorsMixin):
    """
    Строка длиной >= 1 с хотя бы одним не-пробельным символом.

    Args:
        raw_value: Проверяемая строка
        error_message: Текст ошибки (str), используется для всех нарушений

    Raises:
        MissingArgumentError: raw_value или error_message равны None
        OutOfRangeError: raw_value пустая
        InvalidFormatError: raw_value только из пробелов, или error_message пустой
    """

    __slots__ = ("_value",)

    COMPARISON_STRATEGY: ClassVar[ComparisonStrategy] = ComparisonStrategy.ORDINAL
    DEFAULT_ERROR_MESSAGE: ClassVar[str] = DEFAULT_ERROR_MESSAGE

    def __init__(self, raw_value: str, error_message: str = DEFAULT_ERROR_MESSAGE) -> None:
        object.__setattr__(self, "_value", self._validate(raw_value, error_message))

    @classmethod
    def _validate(cls, raw_value: str, error_message: str) -> ConfigurableString:
        arguments.not_none(error_message, "error_message", INVALID_CUSTOM_ERROR_MESSAGE_MESSAGE)
        if not isinstance(error_message, str) or not error_message.strip():
            raise InvalidFormatError(INVALID_CUSTOM_ERROR_MESSAGE_MESSAGE, "error_message")

        builder = (
            ConfigurableStringBuilder(ErrorMessage(error_message), use_single_message=True)
            .with_min_length(StringLength(1))
            .with_allow_whitespaces_only(False)
            .with_comparison_strategy(cls.COMPARISON_STRATEGY)
        )
        return builder.build(raw_value)

    @property
    def value(self) -> str:
        return self._value.value

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    def __copy__(self) -> "NonEmptyOrWhiteSpaceString":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "NonEmptyOrWhiteSpaceString":
        return self

    def equals(self, other: Any) -> bool:
        return relational.equal(
            self,
            other,
            lambda o: isinstance(o, NonEmptyOrWhiteSpaceString) and self._value.equals(o._value),
        )

    def compare_to(self, other: Any) -> int:
        if other is not None and not isinstance(other, NonEmptyOrWhiteSpaceString):
            raise TypeError(
                f"Cannot compare NonEmptyOrWhiteSpaceString with {type(other).__name__}"
            )
        return relational.compare(self, other, lambda o: self._value.compare_to(o._value))

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"NonEmptyOrWhiteSpaceString({self.value!r})"
