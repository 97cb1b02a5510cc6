"""
LocForge Enum Definitions

Type-safe enums for catalog entry kinds and output file outcomes.
"""

from enum import Enum


class EntryKind(str, Enum):
    """How an entry value was declared in the catalog source."""
    PLAIN = 'plain'
    TEMPLATE = 'template'


class WriteOutcome(str, Enum):
    """Result of an attempt to produce one output catalog."""
    WRITTEN = 'written'
    SKIPPED_EMPTY = 'skipped_empty'
    SKIPPED_EXISTS = 'skipped_exists'
    FAILED = 'failed'


class OutputKind(str, Enum):
    """Role of an output catalog within a group."""
    BASE = 'base'
    DEFAULT_COUNTRY_MARKER = 'default_country_marker'
    DIALECT = 'dialect'
