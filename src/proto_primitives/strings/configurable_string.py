"""
ConfigurableString — Строка с набором настраиваемых проверок формата

ConfigurableStringBuilder накапливает правила и одним вызовом build()
проверяет строку и создаёт immutable ConfigurableString.

Порядок проверок в build() (fail fast, первая ошибка останавливает pipeline):
1. length_range     — min <= len(value) <= max (и min <= max самих границ)
2. trimming         — requires_trimmed или запрет leading/trailing пробелов
3. invalid_chars    — invalid_chars_regex не должен находить совпадений
4. valid_format     — valid_format_regex должен находить совпадение
5. whitespace_only  — запрет строки из одних пробелов (только при min_length > 0)
6. custom_parser    — пользовательская проверка, ошибки не оборачиваются

Builder одноразовый: после первого build() (успешного или нет) любой вызов
бросает AlreadyBuiltError.
"""

import logging
import re
from typing import Any, Callable, Dict, Final, Optional, Tuple, Union

from pydantic import BaseModel

from proto_primitives.core import arguments, relational
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.validated_value import ValidatedValue
from proto_primitives.errors import (
    AlreadyBuiltError,
    DomainPrimitiveError,
    InvalidFormatError,
    InvalidTypeError,
    OutOfRangeError,
)
from proto_primitives.numerics.string_length import StringLength, StringLengthRange
from proto_primitives.strings.comparison import ComparisonStrategy
from proto_primitives.strings.whitespace import (
    has_leading_whitespace,
    has_trailing_whitespace,
    is_not_trimmed,
    is_whitespace_only,
)

logger = logging.getLogger(__name__)

CustomParser = Callable[[str], Any]


# =============================================================================
# СООБЩЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_TOO_SHORT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("Input string is too short.")
DEFAULT_TOO_LONG_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("Input string is too long.")
DEFAULT_INVALID_CHARACTERS_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage(
    "Input string contains invalid characters."
)
DEFAULT_INVALID_FORMAT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage(
    "Input string has an invalid format."
)

# ConfigurableString не валидирует сам себя: все правила применены builder'ом
_FALLBACK_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage("Invalid input.")

RAW_VALUE_PARAM: Final[str] = "raw_value"


# =============================================================================
# RULES
# =============================================================================


class StringRules(BaseModel):
    """
    Снапшот правил builder'а.

    Immutable Pydantic модель: типы всех правил проверяются при создании
    (strict), после чего снапшот можно безопасно применять к любому
    количеству строк. Каждый check_* проверяет одно правило и бросает
    OutOfRangeError/InvalidFormatError.
    """

    comparison_strategy: ComparisonStrategy = ComparisonStrategy.ORDINAL

    # Длина
    min_length: Optional[StringLength] = None
    max_length: Optional[StringLength] = None

    # Пробелы
    requires_trimmed: bool = False
    allow_leading_whitespace: bool = True
    allow_trailing_whitespace: bool = True
    allow_whitespaces_only: bool = True

    # Регулярные выражения
    invalid_chars_regex: Optional[re.Pattern] = None
    valid_format_regex: Optional[re.Pattern] = None

    # Сообщения
    too_short_error_message: ErrorMessage = DEFAULT_TOO_SHORT_ERROR_MESSAGE
    too_long_error_message: ErrorMessage = DEFAULT_TOO_LONG_ERROR_MESSAGE
    invalid_characters_error_message: ErrorMessage = DEFAULT_INVALID_CHARACTERS_ERROR_MESSAGE
    invalid_format_error_message: ErrorMessage = DEFAULT_INVALID_FORMAT_ERROR_MESSAGE

    model_config = {"frozen": True, "strict": True, "arbitrary_types_allowed": True}

    def pipeline(self) -> Tuple[Tuple[str, Callable[[str], None]], ...]:
        """Встроенные правила в порядке применения."""
        return (
            ("length_range", self.check_length_range),
            ("trimming", self.check_trimming),
            ("invalid_chars", self.check_invalid_chars),
            ("valid_format", self.check_valid_format),
            ("whitespace_only", self.check_whitespace_only),
        )

    def check_length_range(self, value: str) -> None:
        # Границы проверяются до самой строки: инвертированный диапазон является ошибкой конфигурации
        StringLengthRange.validate(
            self.min_length or StringLength.MIN, self.max_length or StringLength.MAX
        )

        if self.min_length is not None:
            arguments.greater_than_or_equal_to(
                len(value), self.min_length.value, RAW_VALUE_PARAM, self.too_short_error_message.text
            )
        if self.max_length is not None:
            arguments.less_than_or_equal_to(
                len(value), self.max_length.value, RAW_VALUE_PARAM, self.too_long_error_message.text
            )

    def check_trimming(self, value: str) -> None:
        if not value:
            return

        if self.requires_trimmed:
            violated = is_not_trimmed(value)
        else:
            violated = (not self.allow_leading_whitespace and has_leading_whitespace(value)) or (
                not self.allow_trailing_whitespace and has_trailing_whitespace(value)
            )

        if violated:
            raise InvalidFormatError(self.invalid_format_error_message.text, RAW_VALUE_PARAM)

    def check_invalid_chars(self, value: str) -> None:
        if self.invalid_chars_regex is not None and self.invalid_chars_regex.search(value):
            raise InvalidFormatError(self.invalid_characters_error_message.text, RAW_VALUE_PARAM)

    def check_valid_format(self, value: str) -> None:
        if self.valid_format_regex is not None and not self.valid_format_regex.search(value):
            raise InvalidFormatError(self.invalid_format_error_message.text, RAW_VALUE_PARAM)

    def check_whitespace_only(self, value: str) -> None:
        # Без положительной min_length строка из пробелов допускается даже при
        # allow_whitespaces_only=False
        has_positive_min_length = self.min_length is not None and self.min_length.value > 0
        if (
            not self.allow_whitespaces_only
            and has_positive_min_length
            and is_whitespace_only(value)
        ):
            raise InvalidFormatError(self.invalid_format_error_message.text, RAW_VALUE_PARAM)


# =============================================================================
# CONFIGURABLE STRING
# =============================================================================


def _accept_as_is(raw_value: str, _: ErrorMessage) -> str:
    return raw_value


class ConfigurableString(ValidatedValue[str]):
    """
    Строка, прошедшая правила ConfigurableStringBuilder.

    Создаётся через ConfigurableStringBuilder.build(). Равенство, порядок и
    хэш используют comparison_strategy, зафиксированную при build().
    Экземпляры с разными стратегиями по контракту не сравниваются.
    """

    __slots__ = ("_comparison_strategy",)

    def __init__(self, raw_value: str, comparison_strategy: ComparisonStrategy) -> None:
        super().__init__(raw_value, _FALLBACK_ERROR_MESSAGE, _accept_as_is)
        object.__setattr__(
            self, "_comparison_strategy", arguments.not_none(comparison_strategy, "comparison_strategy")
        )

    @property
    def comparison_strategy(self) -> ComparisonStrategy:
        return self._comparison_strategy

    def _is_comparable_with(self, other: Any) -> bool:
        return isinstance(other, ConfigurableString)

    def equals(self, other: Any) -> bool:
        return relational.equal(
            self,
            other,
            lambda o: isinstance(o, ConfigurableString)
            and self._comparison_strategy.equals(self.value, o.value),
        )

    def compare_to(self, other: Any) -> int:
        if other is not None and not isinstance(other, ConfigurableString):
            raise TypeError(f"Cannot compare ConfigurableString with {type(other).__name__}")
        return relational.compare(
            self, other, lambda o: self._comparison_strategy.compare(self.value, o.value)
        )

    def __hash__(self) -> int:
        return self._comparison_strategy.hash(self.value)

    def __repr__(self) -> str:
        return f"ConfigurableString({self.value!r}, {self._comparison_strategy.value})"


# =============================================================================
# BUILDER
# =============================================================================


class ConfigurableStringBuilder:
    """
    Одноразовый builder для ConfigurableString.

    Состояния: UNBUILT → BUILT (терминальное). Не потокобезопасен:
    один builder — один владелец.

    Args:
        argument_null_error_message: Сообщение для build(None)
        use_single_message: Использовать argument_null_error_message вместо
            всех сообщений по умолчанию (too short/long, invalid chars/format)

    Example:
        >>> value = (
        ...     ConfigurableStringBuilder(ErrorMessage("Name is required."))
        ...     .with_length_range(
        ...         StringLengthRange(StringLength(2), StringLength(4)),
        ...         ErrorMessage("Too short."),
        ...         ErrorMessage("Too long."),
        ...     )
        ...     .build("abc")
        ... )
        >>> value.value
        'abc'
    """

    def __init__(self, argument_null_error_message: ErrorMessage, use_single_message: bool = False):
        self._argument_null_error_message = _message(
            argument_null_error_message, "argument_null_error_message"
        )
        arguments.of_type(use_single_message, bool, "use_single_message")

        self._built = False
        self._settings: Dict[str, Any] = {}

        if use_single_message:
            self._settings.update(
                too_short_error_message=argument_null_error_message,
                too_long_error_message=argument_null_error_message,
                invalid_characters_error_message=argument_null_error_message,
                invalid_format_error_message=argument_null_error_message,
            )

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def rules(self) -> StringRules:
        """Текущий снапшот правил."""
        return StringRules(**self._settings)

    # -------------------------------------------------------------------------
    # Comparison strategy
    # -------------------------------------------------------------------------

    def with_comparison_strategy(
        self, comparison_strategy: ComparisonStrategy
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        arguments.not_none(comparison_strategy, "comparison_strategy")
        try:
            strategy = ComparisonStrategy(comparison_strategy)
        except ValueError:
            raise OutOfRangeError(
                "Unknown comparison strategy.", "comparison_strategy", comparison_strategy
            ) from None
        self._settings["comparison_strategy"] = strategy
        return self

    # -------------------------------------------------------------------------
    # Length
    # -------------------------------------------------------------------------

    def with_min_length(
        self, min_length: StringLength, too_short_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        self._settings["min_length"] = self._require_length(min_length, "min_length")
        if too_short_error_message is not None:
            self._settings["too_short_error_message"] = _message(
                too_short_error_message, "too_short_error_message"
            )
        return self

    def with_max_length(
        self, max_length: StringLength, too_long_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        self._settings["max_length"] = self._require_length(max_length, "max_length")
        if too_long_error_message is not None:
            self._settings["too_long_error_message"] = _message(
                too_long_error_message, "too_long_error_message"
            )
        return self

    def with_length_range(
        self,
        length_range: StringLengthRange,
        too_short_error_message: ErrorMessage,
        too_long_error_message: ErrorMessage,
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        arguments.not_none(length_range, "length_range")
        arguments.of_type(length_range, StringLengthRange, "length_range")
        self._settings.update(
            min_length=length_range.min,
            max_length=length_range.max,
            too_short_error_message=_message(too_short_error_message, "too_short_error_message"),
            too_long_error_message=_message(too_long_error_message, "too_long_error_message"),
        )
        return self

    # -------------------------------------------------------------------------
    # Whitespace
    # -------------------------------------------------------------------------

    def with_requires_trimmed(
        self,
        requires_trimmed: bool = True,
        invalid_format_error_message: Optional[ErrorMessage] = None,
    ) -> "ConfigurableStringBuilder":
        """requires_trimmed=True также запрещает leading/trailing пробелы и строку из пробелов."""
        self._ensure_not_built()
        arguments.of_type(requires_trimmed, bool, "requires_trimmed")
        self._set_invalid_format_error_message(invalid_format_error_message)

        self._settings["requires_trimmed"] = requires_trimmed
        if requires_trimmed:
            self._settings.update(
                allow_leading_whitespace=False,
                allow_trailing_whitespace=False,
                allow_whitespaces_only=False,
            )
        return self

    def with_allow_leading_whitespace(
        self,
        allow_leading_whitespace: bool,
        invalid_format_error_message: Optional[ErrorMessage] = None,
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        arguments.of_type(allow_leading_whitespace, bool, "allow_leading_whitespace")
        self._set_invalid_format_error_message(invalid_format_error_message)
        self._settings["allow_leading_whitespace"] = allow_leading_whitespace
        return self

    def with_allow_trailing_whitespace(
        self,
        allow_trailing_whitespace: bool,
        invalid_format_error_message: Optional[ErrorMessage] = None,
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        arguments.of_type(allow_trailing_whitespace, bool, "allow_trailing_whitespace")
        self._set_invalid_format_error_message(invalid_format_error_message)
        self._settings["allow_trailing_whitespace"] = allow_trailing_whitespace
        return self

    def with_allow_whitespaces_only(
        self,
        allow_whitespaces_only: bool,
        invalid_format_error_message: Optional[ErrorMessage] = None,
    ) -> "ConfigurableStringBuilder":
        """allow_whitespaces_only=True также разрешает leading/trailing пробелы и снимает requires_trimmed."""
        self._ensure_not_built()
        arguments.of_type(allow_whitespaces_only, bool, "allow_whitespaces_only")
        self._set_invalid_format_error_message(invalid_format_error_message)

        self._settings["allow_whitespaces_only"] = allow_whitespaces_only
        if allow_whitespaces_only:
            self._settings.update(
                allow_leading_whitespace=True,
                allow_trailing_whitespace=True,
                requires_trimmed=False,
            )
        return self

    # -------------------------------------------------------------------------
    # Patterns
    # -------------------------------------------------------------------------

    def with_invalid_chars_pattern(
        self, pattern: str, invalid_characters_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        return self._set_invalid_chars(_compile(pattern), invalid_characters_error_message)

    def with_invalid_chars_regex(
        self, regex: re.Pattern, invalid_characters_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        return self._set_invalid_chars(_require_regex(regex), invalid_characters_error_message)

    def with_valid_format_pattern(
        self, pattern: str, invalid_format_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        return self._set_valid_format(_compile(pattern), invalid_format_error_message)

    def with_valid_format_regex(
        self, regex: re.Pattern, invalid_format_error_message: Optional[ErrorMessage] = None
    ) -> "ConfigurableStringBuilder":
        self._ensure_not_built()
        return self._set_valid_format(_require_regex(regex), invalid_format_error_message)

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def build(
        self, raw_value: Optional[str], custom_parser: Optional[CustomParser] = None
    ) -> ConfigurableString:
        """
        Проверка raw_value всеми правилами и создание ConfigurableString.

        Args:
            raw_value: Проверяемая строка
            custom_parser: Вызывается последним, после всех встроенных правил.
                Бросает исключение, чтобы отклонить значение

        Raises:
            AlreadyBuiltError: Если build() уже вызывался
            MissingArgumentError: Если raw_value is None
            OutOfRangeError: Нарушение длины
            InvalidFormatError: Нарушение правил пробелов, символов или формата
            Exception: Любая ошибка custom_parser, без изменений
        """
        self._ensure_not_built()
        self._built = True

        arguments.not_none(raw_value, RAW_VALUE_PARAM, self._argument_null_error_message.text)
        arguments.of_type(raw_value, str, RAW_VALUE_PARAM, self._argument_null_error_message.text)
        if custom_parser is not None and not callable(custom_parser):
            raise InvalidTypeError("custom_parser must be callable.", "custom_parser")

        rules = self.rules
        for rule_name, check in rules.pipeline():
            try:
                check(raw_value)
            except DomainPrimitiveError:
                logger.debug("Rule '%s' rejected input of length %d", rule_name, len(raw_value))
                raise

        if custom_parser is not None:
            custom_parser(raw_value)

        logger.debug("Built ConfigurableString with strategy %s", rules.comparison_strategy.value)
        return ConfigurableString(raw_value, rules.comparison_strategy)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _ensure_not_built(self) -> None:
        if self._built:
            raise AlreadyBuiltError()

    def _set_invalid_format_error_message(self, message: Optional[ErrorMessage]) -> None:
        if message is not None:
            self._settings["invalid_format_error_message"] = _message(
                message, "invalid_format_error_message"
            )

    def _set_invalid_chars(
        self, regex: re.Pattern, message: Optional[ErrorMessage]
    ) -> "ConfigurableStringBuilder":
        self._settings["invalid_chars_regex"] = regex
        if message is not None:
            self._settings["invalid_characters_error_message"] = _message(
                message, "invalid_characters_error_message"
            )
        return self

    def _set_valid_format(
        self, regex: re.Pattern, message: Optional[ErrorMessage]
    ) -> "ConfigurableStringBuilder":
        self._settings["valid_format_regex"] = regex
        self._set_invalid_format_error_message(message)
        return self

    @staticmethod
    def _require_length(length: StringLength, param_name: str) -> StringLength:
        arguments.not_none(length, param_name)
        return arguments.of_type(length, StringLength, param_name)


def _message(message: Optional[ErrorMessage], param_name: str) -> ErrorMessage:
    arguments.not_none(message, param_name)
    return arguments.of_type(message, ErrorMessage, param_name)


def _compile(pattern: Union[str, None]) -> re.Pattern:
    arguments.not_none(pattern, "pattern")
    arguments.of_type(pattern, str, "pattern")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidFormatError(f"Invalid regular expression: {exc}", "pattern") from exc


def _require_regex(regex: Optional[re.Pattern]) -> re.Pattern:
    arguments.not_none(regex, "regex")
    return arguments.of_type(regex, re.Pattern, "regex")
