"""Errores del decodificador.

Solo los fallos de entorno son errores: la ausencia de un parámetro nunca lo es.
"""

from __future__ import annotations


class UnsupportedEncodingError(RuntimeError):
    """The runtime has no codec for the configured form encoding.

    This signals a broken environment/configuration, not bad input, so it
    aborts the whole query instead of being contained to a single pair.
    """

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Runtime doesn't support {encoding} encoding")
        self.encoding = encoding
