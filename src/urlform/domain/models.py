"""Valores que producen el decoder y los lookups.

Ambos modelos son `frozen`: se comparan por valor, así que
`type.entity("v") == type.entity_from_string("v")` y los tests pueden comparar
listas de parámetros directamente.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


class DecodedEntry(BaseModel):
    """Un par `key[=value]` ya decodificado.

    Por qué `value` es opcional:
    - `key` y `key=` son distintos: el primero no tiene valor (`None`), el
      segundo tiene un valor vacío (`""`).
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        description="Key decodificada (puede ser vacía).",
    )
    value: str | None = Field(
        default=None,
        description="Value decodificado; None si el par no contiene separador.",
    )


class Parameter(BaseModel, Generic[T]):
    """Valor tipado asociado al nombre de su `ParameterType`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Nombre del tipo de parámetro que produjo el valor.",
    )
    value: T | None = Field(
        default=None,
        description="Valor convertido; None si el par no tenía valor.",
    )
