# -*- coding: utf-8 -*-
"""
LocForge Models Package

Plain data holders for catalog entries, merged catalog groups and run reports.
"""

from models.catalog_entry import CatalogEntry, EntryMap
from models.catalog_group import CatalogGroup, merge_entries
from models.run_report import GroupReport, OutputRecord, RunReport

__all__ = [
    'CatalogEntry',
    'EntryMap',
    'CatalogGroup',
    'merge_entries',
    'GroupReport',
    'OutputRecord',
    'RunReport',
]
