# -*- coding: utf-8 -*-
"""
Tests for dialect diffing.
"""

from core.diff_engine import diff_translations
from models.catalog_entry import CatalogEntry


def _entries(*rows):
    return {key: CatalogEntry(key, value, is_template) for key, value, is_template in rows}


class TestDiffTranslations:

    def test_keeps_only_changed_entries(self):
        base = _entries(('a', 'Farbe', False), ('b', 'Tag', False))
        variant = _entries(('a', 'Farbe', False), ('b', 'Servus', False))

        assert diff_translations(base, variant) == _entries(('b', 'Servus', False))

    def test_template_flag_is_part_of_the_content(self):
        base = _entries(('a', 'Hallo ${0}', False))
        variant = _entries(('a', 'Hallo ${0}', True))

        assert list(diff_translations(base, variant)) == ['a']

    def test_keys_missing_from_base_are_included(self):
        base = _entries(('a', 'A', False))
        variant = _entries(('z', 'Z', False), ('a', 'A', False), ('y', 'Y', True))

        assert list(diff_translations(base, variant)) == ['z', 'y']

    def test_identical_catalogs_give_empty_diff(self):
        base = _entries(('a', 'A', False), ('b', 'B ${0}', True))
        assert diff_translations(base, dict(base)) == {}
