"""
Catalog discovery and grouping.

Walks a source tree, picks up the English catalogs (en.js, en-US.js,
en-GB.js) and folds each one into the group of its nearest enclosing
i18n folder. Files with no i18n ancestor belong to no group and are
skipped silently.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, Optional

import locforge_config as config
from locforge_exceptions import CatalogReadError, CatalogScanError
from locforge_logger import get_logger
from models.catalog_group import CatalogGroup
from parser.catalog_parser import parse_catalog_file

logger = get_logger("core.catalog_scanner")


def normalize_path(path) -> Path:
    """Absolute, normalized path without resolving symlinks."""
    return Path(os.path.normpath(os.path.abspath(path)))


def is_catalog_file(path: Path) -> bool:
    return Path(path).name in config.CATALOG_FILE_NAMES


def find_i18n_folder(path: Path, marker: str = config.I18N_MARKER_DIR) -> Optional[Path]:
    """
    Nearest ancestor (inclusive) whose final component equals the marker.

    Args:
        path: File or directory to start from
        marker: Directory name that identifies a localization folder

    Returns:
        Normalized path of the owning folder, or None if there is none
    """
    current = normalize_path(path)
    for candidate in (current, *current.parents):
        if candidate.name == marker:
            return candidate
    return None


def iter_files(root: Path) -> Iterator[Path]:
    """
    Depth-first walk yielding regular files in sorted name order.

    Directory symlinks are not followed. A sub-directory that cannot be
    listed is logged and skipped; if the root itself cannot be listed the
    whole walk fails with CatalogScanError.
    """
    root = normalize_path(root)
    try:
        top_entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError as e:
        raise CatalogScanError(f"Failed to walk directory {root}: {e}", root=str(root)) from e

    yield from _iter_entries(top_entries)


def _iter_entries(entries) -> Iterator[Path]:
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                try:
                    children = sorted(os.scandir(entry.path), key=lambda e: e.name)
                except OSError as e:
                    logger.error(f"Failed to list {entry.path}: {e}")
                    continue
                yield from _iter_entries(children)
            elif entry.is_file():
                yield Path(entry.path)
        except OSError as e:
            logger.error(f"Failed to inspect {entry.path}: {e}")


def scan_catalog_groups(root) -> Dict[Path, CatalogGroup]:
    """
    Find every English catalog under root and merge them per i18n folder.

    Files are folded in discovery order, later files overriding earlier
    ones on duplicate keys. Unreadable catalogs are logged and skipped.

    Args:
        root: Directory to scan recursively

    Returns:
        Dict of i18n folder path -> CatalogGroup, in discovery order

    Raises:
        CatalogScanError: If root is not a directory or cannot be walked
    """
    root_path = normalize_path(root)
    if not root_path.is_dir():
        raise CatalogScanError(f"Path {root} is not a directory", root=str(root))

    groups: Dict[Path, CatalogGroup] = {}
    for file_path in iter_files(root_path):
        if not is_catalog_file(file_path):
            continue
        merge_file_into_group(groups, file_path)

    logger.info(f"Found {len(groups)} catalog group(s) under {root_path}")
    return groups


def merge_file_into_group(groups: Dict[Path, CatalogGroup], file_path: Path) -> Optional[CatalogGroup]:
    """Parse one catalog file and fold it into its group (created on demand)."""
    i18n_folder = find_i18n_folder(file_path)
    if i18n_folder is None:
        logger.debug(f"Ignoring {file_path}: no '{config.I18N_MARKER_DIR}' ancestor")
        return None

    group = groups.get(i18n_folder)
    if group is None:
        group = groups[i18n_folder] = CatalogGroup(directory=i18n_folder)

    try:
        entries = parse_catalog_file(file_path)
    except CatalogReadError as e:
        logger.error(e.message)
        return group

    group.merge(file_path, entries)
    return group
