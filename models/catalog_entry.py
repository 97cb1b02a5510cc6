# -*- coding: utf-8 -*-
"""
LocForge CatalogEntry Model

A single key/value pair scraped from (or written to) a UI-string catalog.
"""

from dataclasses import dataclass
from typing import Dict

from locforge_enums import EntryKind


@dataclass(frozen=True)
class CatalogEntry:
    """
    One catalog entry.

    Attributes:
        key (str): Message key, unique within a catalog group.
        value (str): Message text (English in sources, translated in outputs).
        is_template (bool): True if declared as str`...` rather than a quoted string.
    """
    key: str
    value: str
    is_template: bool = False

    @property
    def kind(self) -> EntryKind:
        return EntryKind.TEMPLATE if self.is_template else EntryKind.PLAIN

    def same_content(self, other: "CatalogEntry") -> bool:
        """Compare (value, is_template); keys are not part of the content."""
        return (self.value, self.is_template) == (other.value, other.is_template)

    def with_value(self, value: str) -> "CatalogEntry":
        """Return a copy carrying a new value and the same template flag."""
        return CatalogEntry(self.key, value, self.is_template)


# Ordered mapping of key -> entry. Plain dicts keep insertion order.
EntryMap = Dict[str, CatalogEntry]
