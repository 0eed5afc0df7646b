"""Vista de solo lectura sobre un string x-www-form-urlencoded.

Por qué no se parsea en el constructor:
- Cada consulta recorre el string de forma perezosa; no hay colecciones
  intermedias ni estado mutable compartido entre llamadas o hilos.
- `str()` devuelve exactamente el texto original: nunca se re-codifica.
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from urlform.config import FormSettings, get_settings
from urlform.domain.models import DecodedEntry, Parameter
from urlform.interfaces.parameters import ParameterType
from urlform.services import lookup

T = TypeVar("T")


class UrlFormEncoded:
    """Key-value pairs parsed lazily from a form-encoded string.

    Implements `urlform.interfaces.parameters.Parametrized`.
    """

    __slots__ = ("_form_encoded", "_settings")

    def __init__(self, form_encoded: str, settings: FormSettings | None = None) -> None:
        self._form_encoded = form_encoded
        self._settings = settings or get_settings()

    @property
    def settings(self) -> FormSettings:
        return self._settings

    def entries(self) -> Iterator[DecodedEntry]:
        """Every decoded pair, in source order."""

        return lookup.iter_entries(self._form_encoded, self._settings)

    def parameters(self, parameter_type: ParameterType[T]) -> Iterator[Parameter[T]]:
        """Every value whose decoded key equals `parameter_type.name`, in order."""

        return lookup.iter_parameters(self._form_encoded, parameter_type, self._settings)

    def first_parameter(self, parameter_type: ParameterType[T], default: T) -> Parameter[T]:
        return lookup.first_parameter(self._form_encoded, parameter_type, default, self._settings)

    def has_parameter(self, parameter_type: ParameterType[T]) -> bool:
        return lookup.has_parameter(self._form_encoded, parameter_type, self._settings)

    def __str__(self) -> str:
        return self._form_encoded

    def __repr__(self) -> str:
        return f"UrlFormEncoded({self._form_encoded!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UrlFormEncoded):
            return self._form_encoded == other._form_encoded and self._settings == other._settings
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._form_encoded)
