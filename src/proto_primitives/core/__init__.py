"""
Core — Базовая инфраструктура валидации и сравнения.

Не зависит от конкретных primitives: numerics/strings/temporal строятся поверх.
"""

from proto_primitives.core.error_message import ErrorMessage
from proto_primitives.core.validated_value import ValidatedValue, Validator

__all__ = [
    "ErrorMessage",
    "ValidatedValue",
    "Validator",
]
