"""Split and decode of raw `key=value` pairs.

The splitter never looks at percent-escapes: an escaped `%26` is three plain
characters until the pair has been cut out, so a literal separator is always
a split point. Decoding happens per component, one pair at a time, so a
malformed escape only affects the entry that contains it.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator
from urllib.parse import unquote, unquote_plus

from urlform.config import FormSettings
from urlform.domain.models import DecodedEntry
from urlform.errors import UnsupportedEncodingError

logger = logging.getLogger(__name__)

# A '%' that does not start a two-hex-digit escape.
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_REPLACEMENT_CHAR = "\ufffd"


def iter_raw_pairs(text: str, separator: str = "&") -> Iterator[str]:
    """Yield the substrings between separators, left to right.

    An empty string yields nothing. Leading, trailing or doubled separators
    yield empty pairs.
    """

    if not text:
        return

    start = 0
    while True:
        end = text.find(separator, start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1


class PairDecoder:
    """Turns raw pairs into `DecodedEntry` objects.

    Lenient policy for malformed input:
    - a `%` not followed by two hex digits is kept literally;
    - escaped bytes that are invalid in the encoding become U+FFFD.
    """

    def __init__(self, settings: FormSettings) -> None:
        # bytes.decode rejects codecs that are not text encodings (rot13, hex, base64).
        try:
            b"".decode(settings.encoding)
        except LookupError as exc:
            raise UnsupportedEncodingError(settings.encoding) from exc
        self._encoding = settings.encoding
        self._plus_as_space = settings.plus_as_space
        self._value_separator = settings.value_separator

    def decode_pair(self, raw: str) -> DecodedEntry:
        idx = raw.find(self._value_separator)
        if idx < 0:
            return DecodedEntry(key=self.decode_component(raw), value=None)
        return DecodedEntry(
            key=self.decode_component(raw[:idx]),
            value=self.decode_component(raw[idx + 1 :]),
        )

    def decode_component(self, text: str) -> str:
        """Percent-decode one key or value."""

        if "%" not in text and not (self._plus_as_space and "+" in text):
            return text

        if self._plus_as_space:
            decoded = unquote_plus(text, encoding=self._encoding, errors="replace")
        else:
            decoded = unquote(text, encoding=self._encoding, errors="replace")

        if _MALFORMED_ESCAPE.search(text) or (
            _REPLACEMENT_CHAR in decoded and _REPLACEMENT_CHAR not in text
        ):
            logger.debug("Malformed percent-escape in %r, decoded leniently to %r", text, decoded)
        return decoded
