"""Числовые domain primitives."""

from proto_primitives.numerics.integers import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    NegativeInteger,
    NegativeLong,
    PositiveInteger,
    PositiveLong,
)
from proto_primitives.numerics.string_length import StringLength, StringLengthRange

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "PositiveInteger",
    "NegativeInteger",
    "PositiveLong",
    "NegativeLong",
    "StringLength",
    "StringLengthRange",
]
