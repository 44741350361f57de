"""
Тесты ValidatedValue

Проверяет:
1. Порядок проверок аргументов конструктора
2. Вызов validator ровно один раз
3. Контракт validator: None → ValidatorContractError (+ ERROR лог)
4. Immutability, value, str/repr
"""

import copy
import logging
from dataclasses import FrozenInstanceError

import pytest

from proto_primitives import ErrorMessage, ValidatedValue
from proto_primitives.core import arguments
from proto_primitives.errors import (
    InvalidFormatError,
    InvalidTypeError,
    MissingArgumentError,
    OutOfRangeError,
    ValidatorContractError,
)


MESSAGE = ErrorMessage("Value must be even.")


def validate_even(raw_value: int, error_message: ErrorMessage) -> int:
    if raw_value % 2:
        raise OutOfRangeError(error_message.text, "raw_value", raw_value)
    return raw_value


class EvenNumber(ValidatedValue[int]):
    __slots__ = ()

    def __init__(self, raw_value: int, error_message: ErrorMessage = MESSAGE) -> None:
        super().__init__(raw_value, error_message, validate_even)


class Word(ValidatedValue[str]):
    """Validator возвращает производное значение."""

    __slots__ = ()

    def __init__(self, raw_value: str) -> None:
        super().__init__(raw_value, MESSAGE, lambda raw, _: raw.lower())


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Конструктор ValidatedValue"""

    def test_valid_value(self) -> None:
        assert EvenNumber(4).value == 4

    def test_validator_failure_propagates(self) -> None:
        """Ошибка validator не оборачивается, текст начинается с сообщения"""
        with pytest.raises(OutOfRangeError) as exc_info:
            EvenNumber(3)
        assert str(exc_info.value).startswith("Value must be even.")
        assert exc_info.value.actual_value == 3

    def test_custom_message(self) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            EvenNumber(3, ErrorMessage("Pick an even number."))
        assert str(exc_info.value).startswith("Pick an even number.")

    def test_derived_value_is_stored(self) -> None:
        assert Word("HeLLo").value == "hello"

    def test_validator_called_once(self) -> None:
        calls = []

        def tracking(raw_value: int, error_message: ErrorMessage) -> int:
            calls.append(raw_value)
            return raw_value

        ValidatedValue(7, MESSAGE, tracking)
        assert calls == [7]

    def test_missing_raw_value(self) -> None:
        """Текст ошибки для None raw_value — сообщение вызывающего"""
        with pytest.raises(MissingArgumentError) as exc_info:
            EvenNumber(None)
        assert exc_info.value.param_name == "raw_value"
        assert str(exc_info.value).startswith("Value must be even.")

    def test_missing_error_message(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            EvenNumber(2, None)
        assert exc_info.value.param_name == "error_message"

    def test_missing_validator_checked_first(self) -> None:
        """validator проверяется до остальных аргументов"""
        with pytest.raises(MissingArgumentError) as exc_info:
            ValidatedValue(None, None, None)
        assert exc_info.value.param_name == "validator"

    def test_plain_str_error_message_rejected(self) -> None:
        """Сообщение передаётся только как ErrorMessage"""
        with pytest.raises(InvalidTypeError) as exc_info:
            EvenNumber(2, "Pick an even number.")
        assert exc_info.value.param_name == "error_message"

    def test_non_callable_validator_rejected(self) -> None:
        with pytest.raises(InvalidTypeError) as exc_info:
            ValidatedValue(2, MESSAGE, "validate_even")
        assert exc_info.value.param_name == "validator"

    def test_validator_returning_none(self, caplog: pytest.LogCaptureFixture) -> None:
        """Нарушение контракта validator — не ошибка валидации"""
        with caplog.at_level(logging.ERROR, logger="proto_primitives.core.validated_value"):
            with pytest.raises(ValidatorContractError) as exc_info:
                ValidatedValue(1, MESSAGE, lambda raw, _: None)
        assert not isinstance(exc_info.value, (ValueError, TypeError))
        assert "returned None" in caplog.text

    def test_validator_may_raise_format_error(self) -> None:
        def no_spaces(raw_value: str, error_message: ErrorMessage) -> str:
            if " " in raw_value:
                raise InvalidFormatError(error_message.text, "raw_value")
            return raw_value

        with pytest.raises(InvalidFormatError):
            ValidatedValue("a b", MESSAGE, no_spaces)

    def test_guard_as_validator(self) -> None:
        """Guard-функции из arguments подходят как тело validator"""
        value = ValidatedValue(
            3, MESSAGE, lambda raw, msg: arguments.between(raw, 1, 5, "raw_value", msg.text)
        )
        assert value.value == 3


# =============================================================================
# IMMUTABILITY / REPRESENTATION
# =============================================================================


class TestImmutability:
    """Экземпляр неизменяем после создания"""

    def test_cannot_assign(self) -> None:
        number = EvenNumber(2)
        with pytest.raises(FrozenInstanceError):
            number._value = 4
        assert number.value == 2

    def test_cannot_assign_new_attribute(self) -> None:
        with pytest.raises(FrozenInstanceError):
            EvenNumber(2).extra = 1

    def test_cannot_delete(self) -> None:
        with pytest.raises(FrozenInstanceError):
            del EvenNumber(2)._value

    def test_value_is_read_only_property(self) -> None:
        with pytest.raises(AttributeError):
            EvenNumber(2).value = 4


    def test_copy_returns_same_instance(self) -> None:
        """Immutable значение не пересоздаётся: validator не вызывается повторно"""
        calls = []

        def tracking(raw_value: int, error_message: ErrorMessage) -> int:
            calls.append(raw_value)
            return raw_value

        number = ValidatedValue(8, MESSAGE, tracking)
        assert copy.copy(number) is number
        assert copy.deepcopy(number) is number
        assert calls == [8]

    def test_deep_copy_of_holder(self) -> None:
        holder = {"numbers": [EvenNumber(2), EvenNumber(4)]}
        copied = copy.deepcopy(holder)
        assert copied == holder
        assert copied["numbers"][0] is holder["numbers"][0]


class TestRepresentation:
    """str / repr / hash выводятся из value"""

    def test_str(self) -> None:
        assert str(EvenNumber(10)) == "10"

    def test_repr(self) -> None:
        assert repr(EvenNumber(10)) == "EvenNumber(10)"
        assert repr(Word("Abc")) == "Word('abc')"

    def test_hash_matches_value(self) -> None:
        assert hash(EvenNumber(10)) == hash(10)

    def test_equals_requires_same_type(self) -> None:
        class OtherEven(EvenNumber):
            __slots__ = ()

        assert EvenNumber(2) != OtherEven(2)
        assert EvenNumber(2) == EvenNumber(2)
