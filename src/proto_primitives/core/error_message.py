"""
ErrorMessage — Непустое сообщение об ошибке валидации

Immutable Pydantic модель. Передаётся в каждый валидирующий конструктор,
чтобы вызывающий код мог задать собственный текст ошибки.

Сравнение и хэширование — ordinal (по code points), как у обычной str.
"""

from typing import Any

from pydantic import BaseModel, field_validator

from proto_primitives.core import arguments, relational
from proto_primitives.core.relational import RelationalOperatorsMixin


class ErrorMessage(RelationalOperatorsMixin, BaseModel):
    """
    Текст ошибки: никогда не пустой и не состоящий только из пробелов.

    Создание:
        ErrorMessage("Age must be positive.")

    Raises (при создании):
        MissingArgumentError: text is None
        InvalidTypeError: text не str
        InvalidFormatError: text пустой или только пробелы
    """

    text: str

    model_config = {"frozen": True, "strict": True}

    def __init__(self, text: str) -> None:
        arguments.not_empty_or_whitespace_only(text, "text")
        super().__init__(text=text)

    @field_validator("text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Проверка на уровне схемы Pydantic."""
        if not v.strip():
            raise ValueError("text can not be empty or white space only")
        return v

    def compare_to(self, other: Any) -> int:
        if other is not None and not isinstance(other, ErrorMessage):
            raise TypeError(f"Cannot compare ErrorMessage with {type(other).__name__}")
        return relational.compare(self, other, lambda o: _ordinal_compare(self.text, o.text))

    def equals(self, other: Any) -> bool:
        return relational.equal(
            self, other, lambda o: isinstance(o, ErrorMessage) and self.text == o.text
        )

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"ErrorMessage({self.text!r})"


def _ordinal_compare(left: str, right: str) -> int:
    return (left > right) - (left < right)
