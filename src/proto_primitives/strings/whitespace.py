"""Предикаты пробелов для ConfigurableStringBuilder (пробел — по str.isspace)."""


def is_whitespace_only(value: str) -> bool:
    """True для строки только из пробелов. Пустая строка тоже считается такой."""
    return all(char.isspace() for char in value)


def has_leading_whitespace(value: str) -> bool:
    return value[:1].isspace()


def has_trailing_whitespace(value: str) -> bool:
    return value[-1:].isspace()


def is_not_trimmed(value: str) -> bool:
    return has_leading_whitespace(value) or has_trailing_whitespace(value)
