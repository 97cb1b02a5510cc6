# -*- coding: utf-8 -*-
"""
Tests for the catalog parser and placeholder patterns.
"""

import pytest

from locforge_exceptions import CatalogReadError
from models.catalog_entry import CatalogEntry
from parser.catalog_parser import parse_catalog, parse_catalog_file
from parser.patterns import CatalogPatterns


SAMPLE_CATALOG = """import { str } from '@lit/localize';

export const templates = {
    'greeting': 'Hello',
    "farewell": "Goodbye",
    'welcome': str`Welcome ${0}`,
    'empty': '',
};
"""


class TestParseCatalog:
    """Tests for parse_catalog()."""

    def test_plain_and_template_entries(self):
        entries = parse_catalog(SAMPLE_CATALOG)

        assert entries['greeting'] == CatalogEntry('greeting', 'Hello', False)
        assert entries['farewell'] == CatalogEntry('farewell', 'Goodbye', False)
        assert entries['welcome'] == CatalogEntry('welcome', 'Welcome ${0}', True)
        assert entries['empty'].value == ''

    def test_plain_entries_come_before_template_entries(self):
        content = "{ 'a': str`A`, 'b': 'B', 'c': str`C`, 'd': 'D' }"
        entries = parse_catalog(content)

        assert list(entries) == ['b', 'd', 'a', 'c']

    def test_template_wins_when_key_matched_by_both_passes(self):
        content = "{ 'x': 'plain', 'y': 'other', 'x': str`templated ${0}` }"
        entries = parse_catalog(content)

        assert list(entries) == ['x', 'y']
        assert entries['x'].is_template
        assert entries['x'].value == 'templated ${0}'

    def test_unrecognized_text_is_ignored(self):
        assert parse_catalog("export default function() { return 42; }") == {}
        assert parse_catalog("") == {}

    def test_bare_placeholders_are_kept_verbatim(self):
        entries = parse_catalog("'count': str`$0 items in $1`")
        assert entries['count'].value == '$0 items in $1'


class TestParseCatalogFile:
    """Tests for parse_catalog_file()."""

    def test_reads_utf8_file(self, tmp_path):
        catalog = tmp_path / "en.js"
        catalog.write_text("'caf': 'Café ☕'", encoding='utf-8')

        assert parse_catalog_file(catalog)['caf'].value == 'Café ☕'

    def test_invalid_utf8_raises_read_error(self, tmp_path):
        catalog = tmp_path / "en.js"
        catalog.write_bytes(b"'a': '\xff\xfe'")

        with pytest.raises(CatalogReadError) as exc_info:
            parse_catalog_file(catalog)
        assert exc_info.value.file_path == str(catalog)

    def test_missing_file_raises_read_error(self, tmp_path):
        with pytest.raises(CatalogReadError):
            parse_catalog_file(tmp_path / "missing" / "en.js")


class TestCatalogPatterns:
    """Tests for placeholder helpers."""

    def test_normalize_placeholders(self):
        assert CatalogPatterns.normalize_placeholders("$0 and ${1}") == "${0} and ${1}"
        assert CatalogPatterns.normalize_placeholders("costs $") == "costs $"

    def test_placeholder_indices(self):
        assert CatalogPatterns.placeholder_indices("Hi ${0}, you have $1 and ${12}") == {0, 1, 12}
        assert CatalogPatterns.placeholder_indices("nothing") == set()
