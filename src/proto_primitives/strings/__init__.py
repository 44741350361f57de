"""Строковые domain primitives."""

from proto_primitives.strings.comparison import ComparisonStrategy
from proto_primitives.strings.configurable_string import (
    ConfigurableString,
    ConfigurableStringBuilder,
    StringRules,
)
from proto_primitives.strings.non_empty import NonEmptyOrWhiteSpaceString

__all__ = [
    "ComparisonStrategy",
    "ConfigurableString",
    "ConfigurableStringBuilder",
    "StringRules",
    "NonEmptyOrWhiteSpaceString",
]
