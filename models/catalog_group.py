# -*- coding: utf-8 -*-
"""
LocForge CatalogGroup Model

All English catalogs living under one i18n folder, folded into a single
ordered entry map. Folding is plain last-write-wins per key: several
"English" file names (en.js, en-US.js, en-GB.js) funnel into one catalog.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from locforge_logger import get_logger
from models.catalog_entry import EntryMap

logger = get_logger("models.catalog_group")


def merge_entries(target: EntryMap, incoming: EntryMap) -> EntryMap:
    """
    Fold incoming entries into target, overwriting on key collision.

    An overwritten key keeps its original position in target; unseen keys
    are appended in incoming's order.

    Returns:
        The target map, for chaining.
    """
    for key, entry in incoming.items():
        target[key] = entry
    return target


@dataclass
class CatalogGroup:
    """
    Catalogs merged per localization directory.

    Attributes:
        directory (Path): Absolute, normalized path of the i18n folder.
        entries (EntryMap): Merged entries in first-insertion order.
        source_files (List[Path]): Contributing files in discovery order.
    """
    directory: Path
    entries: EntryMap = field(default_factory=dict)
    source_files: List[Path] = field(default_factory=list)

    def merge(self, source_file: Path, file_entries: EntryMap) -> None:
        """Fold one parsed file into the group."""
        overwritten = [key for key in file_entries if key in self.entries]
        if overwritten:
            logger.debug(f"{source_file} overrides {len(overwritten)} key(s) in {self.directory}")
        merge_entries(self.entries, file_entries)
        self.source_files.append(source_file)

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
