"""Implementaciones concretas de los contratos de `urlform.interfaces`.

Por qué un paquete:
- Agrupa los tipos de parámetro y conversores que trae la librería.
- El caller puede aportar los suyos siempre que cumplan los Protocols.
"""

from urlform.adapters.converters import (
    BOOLEAN,
    INTEGER,
    PLAIN_STRING,
    BooleanConverter,
    IntegerConverter,
    PlainStringConverter,
)
from urlform.adapters.parameter_types import BasicParameterType

__all__ = [
    "BOOLEAN",
    "INTEGER",
    "PLAIN_STRING",
    "BasicParameterType",
    "BooleanConverter",
    "IntegerConverter",
    "PlainStringConverter",
]
