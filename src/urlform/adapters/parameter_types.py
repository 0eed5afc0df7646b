"""Tipo de parámetro genérico (nombre + conversor).

Por qué una sola clase:
- En vez de una clase por parámetro, cada tipo es un nombre más un
  `ValueConverter`; el Core solo ve el contrato `ParameterType`.
"""

from __future__ import annotations

from typing import TypeVar

from urlform.domain.models import Parameter
from urlform.interfaces.parameters import ParameterType, ValueConverter

T = TypeVar("T")


class BasicParameterType(ParameterType[T]):
    """`ParameterType` que delega la conversión en un `ValueConverter`."""

    def __init__(self, name: str, converter: ValueConverter[T]) -> None:
        self._name = name
        self._converter = converter

    @property
    def name(self) -> str:
        return self._name

    @property
    def converter(self) -> ValueConverter[T]:
        return self._converter

    def entity_from_string(self, value: str | None) -> Parameter[T]:
        if value is None:
            return Parameter(name=self._name, value=None)
        return Parameter(name=self._name, value=self._converter.value_from_string(value))

    def entity(self, value: T) -> Parameter[T]:
        return Parameter(name=self._name, value=value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BasicParameterType):
            return self._name == other._name and self._converter == other._converter
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"BasicParameterType({self._name!r}, {type(self._converter).__name__})"
