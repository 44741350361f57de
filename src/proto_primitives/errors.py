"""
Errors — Таксономия ошибок domain primitives

Иерархия:
    DomainPrimitiveError (base)
    ├── MissingArgumentError   — обязательный аргумент равен None (TypeError)
    ├── InvalidTypeError       — аргумент неподходящего типа (TypeError)
    ├── OutOfRangeError        — значение вне допустимого диапазона (ValueError)
    ├── InvalidFormatError     — строка нарушает структурное правило (ValueError)
    ├── AlreadyBuiltError      — повторное использование одноразового builder (RuntimeError)
    └── ValidatorContractError — validator нарушил собственный контракт (AssertionError)

Каждая ошибка дополнительно наследует встроенное исключение соответствующей
категории, поэтому вызывающий код может ловить как наши типы, так и
стандартные ValueError/TypeError.

Текст ошибки всегда НАЧИНАЕТСЯ с сообщения вызывающего (или дефолтного),
далее идут детали для диагностики: имя параметра и фактическое значение.
"""

from typing import Any, Optional


class DomainPrimitiveError(Exception):
    """Базовое исключение для всех ошибок библиотеки."""


class ArgumentError(DomainPrimitiveError):
    """
    Ошибка конкретного аргумента.

    Attributes:
        message: Сообщение вызывающего (или дефолтное)
        param_name: Имя проверяемого параметра
    """

    def __init__(self, message: str, param_name: Optional[str] = None):
        self.message = message
        self.param_name = param_name
        super().__init__(self._format())

    def _format(self) -> str:
        if self.param_name is None:
            return self.message
        return f"{self.message} (Parameter '{self.param_name}')"


class MissingArgumentError(ArgumentError, TypeError):
    """Обязательный аргумент отсутствует (None)."""


class InvalidTypeError(ArgumentError, TypeError):
    """Аргумент имеет неподходящий тип (например, bool вместо int, naive datetime)."""


class OutOfRangeError(ArgumentError, ValueError):
    """
    Значение нарушает границу: слишком мало, слишком велико, инвертированный диапазон.

    Attributes:
        actual_value: Отклонённое значение
    """

    def __init__(self, message: str, param_name: Optional[str] = None, actual_value: Any = None):
        self.actual_value = actual_value
        super().__init__(message, param_name)

    def _format(self) -> str:
        return f"{super()._format()}\nActual value was {self.actual_value}."


class InvalidFormatError(ArgumentError, ValueError):
    """Строка нарушает структурное правило (пробелы, недопустимые символы, формат)."""


class AlreadyBuiltError(DomainPrimitiveError, RuntimeError):
    """Одноразовый builder уже использован."""

    def __init__(self, message: str = "Already built."):
        super().__init__(message)


class ValidatorContractError(DomainPrimitiveError, AssertionError):
    """
    Validator нарушил свой контракт (например, вернул None).

    Это дефект в реализации validator, а не невалидный ввод пользователя.
    Ловить и игнорировать эту ошибку нельзя.
    """
