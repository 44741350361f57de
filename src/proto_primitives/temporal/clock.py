"""
Clock — Источник текущего времени для временных primitives

Время читается ровно один раз, при валидации. Clock передаётся явно,
чтобы тесты и вызывающий код могли задать детерминированное "сейчас".
"""

from datetime import datetime, timezone
from typing import Final, Protocol

from proto_primitives.errors import InvalidTypeError


class Clock(Protocol):
    """Источник текущего времени (timezone-aware datetime)."""

    def now(self) -> datetime: ...


class SystemClock:
    """Системное время UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Фиксированное время.

    Args:
        instant: Timezone-aware datetime, возвращаемый из now()
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise InvalidTypeError("FixedClock requires a timezone-aware datetime.", "instant")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


SYSTEM_CLOCK: Final[Clock] = SystemClock()
