# File: greetfetch/greeting.py
"""greetfetch.greeting: генерация строки приветствия."""

from __future__ import annotations


def generate(name: str) -> str:
    """Возвращает приветствие для name; пустое имя заменяется на "world"."""
    name = name.strip() or "world"
    return f"Hello {name}!"


__all__ = ["generate"]
