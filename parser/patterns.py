# -*- coding: utf-8 -*-
"""
Catalog Regex Patterns

Centralized regex patterns for scraping Lit/JS UI-string catalogs.
"""

import re


class CatalogPatterns:
    """
    Collection of regex patterns for catalog syntax.

    Organized by category:
    - Entry extraction (plain quoted values, str`...` template values)
    - Template placeholder handling
    """

    # =========================================================================
    # ENTRY EXTRACTION PATTERNS
    # =========================================================================

    # 'key': 'value'  /  "key": "value"  (either quote for either side)
    PLAIN_ENTRY = re.compile(r'''['"]([^'"]+)['"]\s*:\s*['"]([^'"]*)['"]''')

    # 'key': str`value with ${0} placeholders`
    TEMPLATE_ENTRY = re.compile(r'''['"]([^'"]+)['"]\s*:\s*str`([^`]*)`''')

    # =========================================================================
    # PLACEHOLDER PATTERNS
    # =========================================================================

    # $0 shorthand that is not already written as ${0}
    BARE_PLACEHOLDER = re.compile(r'\$(?!\{)(\d+)')
    WRAPPED_PLACEHOLDER = re.compile(r'\$\{(\d+)\}')

    # =========================================================================
    # UTILITY
    # =========================================================================

    @classmethod
    def normalize_placeholders(cls, value: str) -> str:
        """Rewrite $0 as ${0}, leaving ${0} untouched."""
        return cls.BARE_PLACEHOLDER.sub(r'${\1}', value)

    @classmethod
    def placeholder_indices(cls, value: str) -> set:
        """Positional placeholder numbers used by a (normalized) template value."""
        return {int(n) for n in cls.WRAPPED_PLACEHOLDER.findall(cls.normalize_placeholders(value))}
