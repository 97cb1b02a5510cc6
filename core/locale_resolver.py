"""
Locale code resolution.

Maps human-readable language names ("French") to the short codes used in
output file names, finds a language's default country and builds the
display labels ("French (Canada)") handed to translation engines.

The locale table is Babel's CLDR data. Its iteration order follows the
directory listing of Babel's locale-data files and therefore differs
between platforms; find_default_country_code() deliberately takes the
first match in that order without sorting.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale
from babel.localedata import locale_identifiers

import locforge_config as config
from locforge_logger import get_logger

logger = get_logger("core.locale_resolver")

_NON_LOWER_LETTERS = re.compile(r'[^a-z]')
_NON_LETTERS = re.compile(r'[^A-Za-z]')


@dataclass(frozen=True)
class LocaleRecord:
    """One row of the locale table."""
    language: str
    territory: str
    english_language_name: str


class LocaleTable(Protocol):
    """Queryable set of locales."""

    def records(self) -> Iterable[LocaleRecord]:
        ...

    def display_name(self, language: str, territory: str = "") -> str:
        ...


class BabelLocaleTable:
    """LocaleTable backed by Babel's CLDR locale data."""

    def __init__(self):
        self._english = Locale("en")
        self._records: Optional[List[LocaleRecord]] = None

    def records(self) -> List[LocaleRecord]:
        if self._records is None:
            self._records = []
            for identifier in locale_identifiers():
                parts = parse_locale(identifier)
                language, territory = parts[0], parts[1] or ""
                name = self._english.languages.get(language, "")
                self._records.append(LocaleRecord(language, territory, name))
            logger.debug(f"Loaded {len(self._records)} locales from Babel")
        return self._records

    def display_name(self, language: str, territory: str = "") -> str:
        identifier = f"{language}_{territory}" if territory else language
        try:
            return Locale.parse(identifier).get_display_name("en") or ""
        except (UnknownLocaleError, ValueError):
            pass
        # Combinations CLDR has no data for (fr_AT, kli_AT) are composed by hand
        language_name = self._english.languages.get(language) or language
        if not language_name:
            return ""
        if not territory:
            return language_name
        territory_name = self._english.territories.get(territory, territory)
        return f"{language_name} ({territory_name})"


_default_table: Optional[BabelLocaleTable] = None


def default_locale_table() -> BabelLocaleTable:
    global _default_table
    if _default_table is None:
        _default_table = BabelLocaleTable()
    return _default_table


def sanitize_to_code(language_name: str) -> str:
    """Lowercase, keep a-z only, cut to 3 characters; placeholder token when empty."""
    cleaned = _NON_LOWER_LETTERS.sub("", (language_name or "").lower())
    cleaned = cleaned[:config.MAX_CODE_LENGTH]
    return cleaned or config.FALLBACK_LANGUAGE_CODE


def derive_language_code(language_name: str, table: Optional[LocaleTable] = None) -> str:
    """
    Short language code for a language name, e.g. "French" -> "fr".

    Falls back to sanitize_to_code() when no locale's English language name
    matches, or when the matching locale has an empty code.
    """
    if not language_name or not language_name.strip():
        return config.FALLBACK_LANGUAGE_CODE

    table = table or default_locale_table()
    name_lower = language_name.lower()
    for record in table.records():
        if record.english_language_name.lower() == name_lower:
            return record.language if record.language.strip() else sanitize_to_code(language_name)
    return sanitize_to_code(language_name)


def sanitize_country_code(country: Optional[str]) -> str:
    """Letters only, uppercase, at most 3 characters. Empty for non-letter input."""
    if country is None:
        return ""
    cleaned = _NON_LETTERS.sub("", country).upper()
    return cleaned[:config.MAX_CODE_LENGTH]


def sanitize_country_list(countries: Iterable[str]) -> List[str]:
    """Sanitize, drop empty results and duplicates (first occurrence wins)."""
    sanitized: List[str] = []
    for country in countries:
        cleaned = sanitize_country_code(country)
        if cleaned and cleaned not in sanitized:
            sanitized.append(cleaned)
    return sanitized


def find_default_country_code(language_code: str, language_name: Optional[str] = None,
                              table: Optional[LocaleTable] = None) -> Optional[str]:
    """
    First country listed for a language in the locale table.

    Matches on the language code (case-insensitive) or on the English
    language name. The answer depends on the table's iteration order,
    which for Babel is platform-defined.
    """
    table = table or default_locale_table()
    code_lower = (language_code or "").lower()
    name_lower = (language_name or "").lower()
    for record in table.records():
        if not record.territory:
            continue
        if record.language.lower() == code_lower:
            return record.territory
        if name_lower and record.english_language_name.lower() == name_lower:
            return record.territory
    return None


def build_locale_label(language_code: str, country_code: str = "",
                       table: Optional[LocaleTable] = None) -> str:
    """
    Display label for a locale, e.g. ("fr", "CA") -> "French (Canada)".

    Used only as the instruction sent to a translation engine.
    """
    table = table or default_locale_table()
    display = table.display_name(language_code, country_code)
    if display and display.strip():
        return display
    return f"{language_code}-{country_code}" if country_code else language_code
