"""Contratos de parámetros tipados.

Un tipo de parámetro une un nombre (la key ya decodificada que se busca) con
la conversión texto -> valor. `BasicParameterType` los satisface, pero
cualquier clase con la misma forma sirve: no hace falta heredar.
"""

from __future__ import annotations

from typing import Iterator, Protocol, TypeVar, runtime_checkable

from urlform.domain.models import Parameter

T = TypeVar("T")


@runtime_checkable
class ValueConverter(Protocol[T]):
    """Convierte entre el texto decodificado y un valor tipado."""

    def value_from_string(self, text: str) -> T:
        ...

    def value_to_string(self, value: T) -> str:
        ...


@runtime_checkable
class ParameterType(Protocol[T]):
    """Contrato mínimo de un tipo de parámetro.

    Reglas de diseño:
    - `name` se compara contra la key *decodificada*, de forma exacta.
    - `entity_from_string` recibe `None` cuando el par no tenía valor.
    - `entity` construye el parámetro por defecto a partir de un valor tipado.
    """

    @property
    def name(self) -> str:
        ...

    def entity_from_string(self, value: str | None) -> Parameter[T]:
        ...

    def entity(self, value: T) -> Parameter[T]:
        ...


@runtime_checkable
class Parametrized(Protocol):
    """Algo que expone parámetros tipados (p.ej. un formulario o query string)."""

    def parameters(self, parameter_type: ParameterType[T]) -> Iterator[Parameter[T]]:
        """Todos los parámetros del tipo dado, en orden de aparición."""

        ...

    def first_parameter(self, parameter_type: ParameterType[T], default: T) -> Parameter[T]:
        """El primer parámetro del tipo dado o `parameter_type.entity(default)`."""

        ...

    def has_parameter(self, parameter_type: ParameterType[T]) -> bool:
        """True si existe al menos un parámetro del tipo dado."""

        ...
