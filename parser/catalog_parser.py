# -*- coding: utf-8 -*-
"""
Catalog Parser

Lenient scraper for UI-string catalogs. The whole text is scanned twice,
plain entries first and template entries second, into one ordered map.
When a key is matched by both passes the template entry wins, keeping the
key's first-insertion position. Fragments matching neither pattern are
ignored rather than reported.
"""

from pathlib import Path

from locforge_logger import get_logger
from locforge_exceptions import CatalogReadError
from models.catalog_entry import CatalogEntry, EntryMap
from parser.patterns import CatalogPatterns

logger = get_logger("parser.catalog")


def parse_catalog(content: str) -> EntryMap:
    """
    Extract entries from catalog source text.

    Args:
        content: Full text of an en.js style catalog

    Returns:
        Ordered dict of key -> CatalogEntry
    """
    entries: EntryMap = {}

    for match in CatalogPatterns.PLAIN_ENTRY.finditer(content):
        key = match.group(1)
        entries[key] = CatalogEntry(key, match.group(2), False)

    for match in CatalogPatterns.TEMPLATE_ENTRY.finditer(content):
        key = match.group(1)
        entries[key] = CatalogEntry(key, match.group(2), True)

    return entries


def parse_catalog_file(path: Path) -> EntryMap:
    """
    Read and parse one catalog file.

    Raises:
        CatalogReadError: If the file cannot be read or is not valid UTF-8
    """
    try:
        content = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogReadError(f"Failed to read {path}: {e}", file_path=str(path)) from e

    entries = parse_catalog(content)
    logger.debug(f"Parsed {len(entries)} entries from {path}")
    return entries
