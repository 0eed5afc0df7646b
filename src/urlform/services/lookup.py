"""Typed lookups over a form-encoded string.

Every function walks split -> decode -> filter -> convert lazily from the
given string, so each call starts from scratch and `first_parameter` /
`has_parameter` stop decoding as soon as they find a match.
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from urlform.config import FormSettings
from urlform.domain.models import DecodedEntry, Parameter
from urlform.interfaces.parameters import ParameterType
from urlform.services.pairs import PairDecoder, iter_raw_pairs

T = TypeVar("T")


def iter_entries(text: str, settings: FormSettings) -> Iterator[DecodedEntry]:
    """All decoded entries, in source order.

    Raises `UnsupportedEncodingError` on the first step when the configured
    encoding is unknown, even for an empty string.
    """

    decoder = PairDecoder(settings)
    for raw in iter_raw_pairs(text, settings.pair_separator):
        yield decoder.decode_pair(raw)


def iter_parameters(
    text: str,
    parameter_type: ParameterType[T],
    settings: FormSettings,
) -> Iterator[Parameter[T]]:
    name = parameter_type.name
    for entry in iter_entries(text, settings):
        if entry.key == name:
            yield parameter_type.entity_from_string(entry.value)


def first_parameter(
    text: str,
    parameter_type: ParameterType[T],
    default: T,
    settings: FormSettings,
) -> Parameter[T]:
    for parameter in iter_parameters(text, parameter_type, settings):
        return parameter
    return parameter_type.entity(default)


def has_parameter(text: str, parameter_type: ParameterType[T], settings: FormSettings) -> bool:
    for _ in iter_parameters(text, parameter_type, settings):
        return True
    return False
