"""
Dialect diffing.

A dialect catalog (e.g. de-AT.js) only carries the entries whose
translation differs from the base catalog (de.js).
"""

from locforge_logger import get_logger
from models.catalog_entry import EntryMap

logger = get_logger("core.diff_engine")


def diff_translations(base: EntryMap, variant: EntryMap) -> EntryMap:
    """
    Entries of variant that are new or differ from base.

    An entry differs when its (value, is_template) pair is not equal to the
    base entry with the same key. The result follows variant's order.
    """
    diff: EntryMap = {}
    for key, entry in variant.items():
        base_entry = base.get(key)
        if base_entry is None or not base_entry.same_content(entry):
            diff[key] = entry
    logger.debug(f"Dialect diff: {len(diff)} of {len(variant)} entries differ")
    return diff
