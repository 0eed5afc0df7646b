"""Lazy, typed access to application/x-www-form-urlencoded strings."""

from urlform.config import FormSettings, get_settings
from urlform.domain.form import UrlFormEncoded
from urlform.domain.models import DecodedEntry, Parameter
from urlform.errors import UnsupportedEncodingError
from urlform.interfaces.parameters import ParameterType, Parametrized, ValueConverter

__all__ = [
    "DecodedEntry",
    "FormSettings",
    "Parameter",
    "ParameterType",
    "Parametrized",
    "UnsupportedEncodingError",
    "UrlFormEncoded",
    "ValueConverter",
    "get_settings",
]
