"""Conversores concretos texto <-> valor.

Implementa un subset práctico de tipos comunes en query strings.
"""

from __future__ import annotations

_TRUE = frozenset({"", "true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


class PlainStringConverter:
    """Identidad: el valor decodificado tal cual."""

    def value_from_string(self, text: str) -> str:
        return text

    def value_to_string(self, value: str) -> str:
        return value


class IntegerConverter:
    def value_from_string(self, text: str) -> int:
        return int(text.strip())

    def value_to_string(self, value: int) -> str:
        return str(value)


class BooleanConverter:
    """Flags estilo `debug=true`, `debug=0` o `debug=` (vacío cuenta como True)."""

    def value_from_string(self, text: str) -> bool:
        v = text.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise ValueError(f"Not a boolean value: {text!r}")

    def value_to_string(self, value: bool) -> str:
        return "true" if value else "false"


PLAIN_STRING = PlainStringConverter()
INTEGER = IntegerConverter()
BOOLEAN = BooleanConverter()
