"""Configuración del decodificador.

Qué se puede ajustar:
- El charset de los bytes `%XX` (UTF-8 por defecto; `latin-1` para clientes
  antiguos que envían formularios sin UTF-8).
- Si `+` significa espacio: sí en formularios, no en algunas query strings
  generadas a mano.
- Los separadores, para query strings que usan `;` entre pares.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormSettings(BaseSettings):
    """Cómo se corta y decodifica un string x-www-form-urlencoded.

    Es inmutable (`frozen`): un `UrlFormEncoded` guarda la instancia y la
    reutiliza en cada consulta, así que no puede cambiar entre dos lecturas.
    Los separadores se validan al construirla; el charset se comprueba al
    decodificar (ver `UnsupportedEncodingError`).
    """

    model_config = SettingsConfigDict(
        env_prefix="URLFORM_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Charset de los bytes escapados con %XX.",
    )
    plus_as_space: bool = Field(
        default=True,
        description="Decodifica '+' como espacio (convención de formularios).",
    )
    pair_separator: str = Field(
        default="&",
        min_length=1,
        max_length=1,
        description="Separador entre pares key=value.",
    )
    value_separator: str = Field(
        default="=",
        min_length=1,
        max_length=1,
        description="Separador entre key y value dentro de un par.",
    )

    @model_validator(mode="after")
    def check_separators(self) -> "FormSettings":
        if self.pair_separator == self.value_separator:
            raise ValueError("pair_separator and value_separator must differ")
        return self


@lru_cache(maxsize=1)
def get_settings() -> FormSettings:
    """Instancia por defecto compartida (se lee el entorno una sola vez)."""

    return FormSettings()
