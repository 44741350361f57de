"""
Timestamps — Временные domain primitives

FutureTimestamp        — строго позже "сейчас" на момент создания
PastOrPresentTimestamp — не позже "сейчас" на момент создания

"Сейчас" читается из Clock один раз, при валидации. Повторной проверки нет:
FutureTimestamp со временем может оказаться в прошлом. Гарантия действует
только на момент создания.
"""

from datetime import datetime, timezone
from functools import partial
from typing import ClassVar, Final

from proto_primitives.core import arguments
from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.validated_value import ValidatedValue
from proto_primitives.errors import InvalidTypeError
from proto_primitives.temporal.clock import SYSTEM_CLOCK, Clock


FUTURE_DEFAULT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage(
    "'raw_value' must be in the future respect to the system time."
)
PAST_OR_PRESENT_DEFAULT_ERROR_MESSAGE: Final[ErrorMessage] = ErrorMessage(
    "'raw_value' must be current system time or some value in the past."
)

PARAM_NAME: Final[str] = "raw_value"


def _require_aware(raw_value: datetime, error_message: ErrorMessage) -> datetime:
    arguments.of_type(raw_value, datetime, PARAM_NAME, error_message.text)
    if raw_value.tzinfo is None or raw_value.utcoffset() is None:
        raise InvalidTypeError(
            f"{error_message.text} Naive datetime values are not accepted.", PARAM_NAME
        )
    return raw_value


def validate_future(raw_value: datetime, error_message: ErrorMessage, clock: Clock) -> datetime:
    _require_aware(raw_value, error_message)
    return arguments.greater_than(raw_value, clock.now(), PARAM_NAME, error_message.text)


def validate_past_or_present(
    raw_value: datetime, error_message: ErrorMessage, clock: Clock
) -> datetime:
    _require_aware(raw_value, error_message)
    return arguments.less_than_or_equal_to(raw_value, clock.now(), PARAM_NAME, error_message.text)


class _Timestamp(ValidatedValue[datetime]):
    __slots__ = ()

    def to_iso_string(self) -> str:
        """UTC, формат YYYY-MM-DDTHH:MM:SS.fffZ."""
        utc = self.value.astimezone(timezone.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class FutureTimestamp(_Timestamp):
    """
    Timestamp строго в будущем относительно clock.now().

    Args:
        raw_value: Timezone-aware datetime
        error_message: Сообщение об ошибке
        clock: Источник "сейчас" (по умолчанию системное время UTC)

    Raises:
        OutOfRangeError: raw_value <= clock.now()
        InvalidTypeError: raw_value не datetime или naive
    """

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = FUTURE_DEFAULT_ERROR_MESSAGE

    def __init__(
        self,
        raw_value: datetime,
        error_message: ErrorMessage = FUTURE_DEFAULT_ERROR_MESSAGE,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        arguments.not_none(clock, "clock")
        super().__init__(raw_value, error_message, partial(validate_future, clock=clock))


class PastOrPresentTimestamp(_Timestamp):
    """Timestamp не позже clock.now() (равенство допускается)."""

    __slots__ = ()

    DEFAULT_ERROR_MESSAGE: ClassVar[ErrorMessage] = PAST_OR_PRESENT_DEFAULT_ERROR_MESSAGE

    def __init__(
        self,
        raw_value: datetime,
        error_message: ErrorMessage = PAST_OR_PRESENT_DEFAULT_ERROR_MESSAGE,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        arguments.not_none(clock, "clock")
        super().__init__(raw_value, error_message, partial(validate_past_or_present, clock=clock))
