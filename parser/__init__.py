# -*- coding: utf-8 -*-
"""
LocForge Parser Package

Regex-based scraping of JS/Lit UI-string catalogs.
"""

from parser.patterns import CatalogPatterns
from parser.catalog_parser import parse_catalog, parse_catalog_file

__all__ = [
    'CatalogPatterns',
    'parse_catalog',
    'parse_catalog_file',
]
