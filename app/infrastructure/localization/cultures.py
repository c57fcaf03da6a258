"""Culture name parsing.

Names are parsed by their BCP 47 structure (``babel.core.parse_locale``),
so a well-formed tag such as ``en-VN`` has a parent even when CLDR has no
data for it. Culture names arrive from requests, so nothing here raises on
bad input: malformed identifiers simply produce ``None``.
"""

import re
from functools import lru_cache
from typing import NamedTuple, Optional

from babel.core import get_locale_identifier, parse_locale

INVARIANT_CULTURE = ""

# Letters, digits and hyphens only; babel would strip ".encoding" and "@modifier"
_TAG_CHARACTERS = re.compile(r"^[A-Za-z0-9-]+$")


class CultureTag(NamedTuple):
    language: str
    territory: Optional[str] = None
    script: Optional[str] = None
    variant: Optional[str] = None

    @property
    def name(self) -> str:
        return get_locale_identifier(
            (self.language, self.territory, self.script, self.variant), sep="-"
        )


def _valid_language(language: str) -> bool:
    # 2-3 letter codes or 5-8 letter registered subtags; 4 letters is reserved
    return language.isalpha() and (2 <= len(language) <= 3 or 5 <= len(language) <= 8)


@lru_cache(maxsize=512)
def _parse_tag(name: str) -> Optional[CultureTag]:
    tag = name.replace("_", "-")
    if not _TAG_CHARACTERS.match(tag):
        return None
    try:
        language, territory, script, variant = parse_locale(tag, sep="-")[:4]
    except ValueError:
        return None
    if not _valid_language(language):
        return None
    return CultureTag(language, territory, script, variant.lower() if variant else None)


def parse_culture_name(name: Optional[str]) -> Optional[str]:
    """Return the canonical BCP 47 spelling of a culture name.

    Args:
        name: Culture name such as ``"en-us"`` or ``"zh_Hant_TW"``.

    Returns:
        The canonical name (``"en-US"``), or None when the name is empty or
        malformed. Well-formed tags unknown to CLDR (``"en-VN"``) are kept.
    """
    if not isinstance(name, str) or not name.strip():
        return None
    tag = _parse_tag(name.strip())
    return tag.name if tag is not None else None


def parent_culture_name(name: Optional[str]) -> Optional[str]:
    """Return the name of the immediate parent culture.

    The parent drops the most specific subtag: variant, then territory,
    then script. A bare language has the invariant culture as parent.

    Returns:
        The parent name, ``""`` for the invariant parent, or None when the
        culture is invariant itself or malformed.

    Example:
        >>> parent_culture_name("en-VN")
        'en'
        >>> parent_culture_name("de-CH-1996")
        'de-CH'
        >>> parent_culture_name("en")
        ''
        >>> parent_culture_name("not a culture") is None
        True
    """
    if not isinstance(name, str) or not name.strip():
        return None
    tag = _parse_tag(name.strip())
    if tag is None:
        return None

    if tag.variant:
        return tag._replace(variant=None).name
    if tag.territory:
        return tag._replace(territory=None).name
    if tag.script:
        return tag._replace(script=None).name
    return INVARIANT_CULTURE
