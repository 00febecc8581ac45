"""
Collation keys for sorting organisation names.

The default key approximates a root-locale `localeCompare`:
accents and case are ignored at the first level, then accents break ties,
then lower case sorts before upper case, and finally the raw string.
Whitespace sorts before punctuation, punctuation before digits, digits
before letters.
"""
from __future__ import annotations

import locale
import logging
import unicodedata
from typing import Any, Callable, Optional, Tuple

from directory_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CollationKey = Callable[[str], Any]


def _char_class(ch: str) -> int:
    if ch.isspace():
        return 0
    if ch.isalpha():
        return 3
    if ch.isdigit():
        return 2
    return 1


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _accent_marks(text: str) -> Tuple[str, ...]:
    # combining marks grouped per base character; "" for an unaccented one
    marks: list[str] = []
    for ch in unicodedata.normalize("NFKD", text):
        if unicodedata.combining(ch):
            if marks:
                marks[-1] += ch
        else:
            marks.append("")
    return tuple(marks)


def _weights(text: str) -> Tuple[Tuple[int, str], ...]:
    return tuple((_char_class(ch), ch) for ch in text)


def default_collation_key(name: str) -> tuple:
    base = _strip_accents(name)
    return (
        _weights(base.casefold()),
        _accent_marks(name),
        tuple(ch.isupper() for ch in base),
        name,
    )


def make_collation_key(locale_name: Optional[str] = None) -> CollationKey:
    """
    Return the key function used by the sort stage.

    With no locale the built-in key is used. Otherwise LC_COLLATE is switched
    to `locale_name` and `locale.strxfrm` does the work, with the raw name as
    the tiebreak so equal transforms stay deterministic.

    :raises ConfigError: if the locale is not available on this system.
    """
    if not locale_name:
        return default_collation_key

    try:
        locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as e:
        raise ConfigError(f"Collation locale '{locale_name}' is not available: {e}") from e

    logger.info("Using system collation", extra={"collation_locale": locale_name})

    def strxfrm_key(name: str) -> tuple:
        return (locale.strxfrm(name), name)

    return strxfrm_key
