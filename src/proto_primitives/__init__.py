"""
proto_primitives — Immutable domain primitives

Значение валидируется ровно один раз, при создании. После этого экземпляр
гарантированно валиден до конца своей жизни.

Пакеты:
- core:      ValidatedValue, ErrorMessage, RelationalOperators helper
- numerics:  PositiveInteger, NegativeInteger, PositiveLong, NegativeLong,
             StringLength, StringLengthRange
- strings:   ConfigurableString + builder, NonEmptyOrWhiteSpaceString
- temporal:  FutureTimestamp, PastOrPresentTimestamp, Clock
"""

from proto_primitives.core import ErrorMessage, ValidatedValue
from proto_primitives.errors import (
    AlreadyBuiltError,
    DomainPrimitiveError,
    InvalidFormatError,
    InvalidTypeError,
    MissingArgumentError,
    OutOfRangeError,
    ValidatorContractError,
)
from proto_primitives.numerics import (
    NegativeInteger,
    NegativeLong,
    PositiveInteger,
    PositiveLong,
    StringLength,
    StringLengthRange,
)
from proto_primitives.strings import (
    ComparisonStrategy,
    ConfigurableString,
    ConfigurableStringBuilder,
    NonEmptyOrWhiteSpaceString,
    StringRules,
)
from proto_primitives.temporal import (
    SYSTEM_CLOCK,
    Clock,
    FixedClock,
    FutureTimestamp,
    PastOrPresentTimestamp,
    SystemClock,
)

__all__ = [
    # Core
    "ErrorMessage",
    "ValidatedValue",
    # Errors
    "DomainPrimitiveError",
    "MissingArgumentError",
    "InvalidTypeError",
    "OutOfRangeError",
    "InvalidFormatError",
    "AlreadyBuiltError",
    "ValidatorContractError",
    # Numerics
    "PositiveInteger",
    "NegativeInteger",
    "PositiveLong",
    "NegativeLong",
    "StringLength",
    "StringLengthRange",
    # Strings
    "ComparisonStrategy",
    "ConfigurableString",
    "ConfigurableStringBuilder",
    "StringRules",
    "NonEmptyOrWhiteSpaceString",
    # Temporal
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "FutureTimestamp",
    "PastOrPresentTimestamp",
]
