# File: greetfetch/strings.py
"""greetfetch.strings: строковые преобразования."""


def magical(text: str) -> str:
    """Переводит text в верхний регистр."""
    return text.upper()


__all__ = ["magical"]
