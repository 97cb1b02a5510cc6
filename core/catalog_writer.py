"""
Catalog serialization.

Renders an ordered entry map back into the module format the catalogs are
written in:

    import { str } from '@lit/localize';

    export const templates = {
        'greeting': 'Hello',
        'welcome': str`Welcome ${0}`,
    };

The import line only appears when at least one entry is a template.
"""

from pathlib import Path
from typing import Callable, Optional

import locforge_config as config
from locforge_enums import EntryKind, WriteOutcome
from locforge_exceptions import CatalogWriteError
from locforge_logger import get_logger
from models.catalog_entry import CatalogEntry, EntryMap
from parser.patterns import CatalogPatterns

logger = get_logger("core.catalog_writer")


def escape_single_quotes(value: str) -> str:
    return value.replace("'", "\\'")


def escape_backticks(value: str) -> str:
    return value.replace("`", "\\`")


def normalize_template_placeholders(value: str) -> str:
    """Convert $0 to ${0} while leaving ${0} intact."""
    return CatalogPatterns.normalize_placeholders(value)


def render_entry(entry: CatalogEntry) -> str:
    if entry.kind == EntryKind.TEMPLATE:
        rendered = f"str`{escape_backticks(normalize_template_placeholders(entry.value))}`"
    else:
        rendered = f"'{escape_single_quotes(entry.value)}'"
    return f"{config.INDENT}'{entry.key}': {rendered},\n"


def render_catalog(entries: EntryMap) -> str:
    """Render entries, in iteration order, as a JS module source."""
    parts = []
    if any(entry.is_template for entry in entries.values()):
        parts.append(config.TEMPLATE_IMPORT_LINE + "\n\n")
    parts.append(f"export const {config.EXPORT_NAME} = {{\n")
    parts.extend(render_entry(entry) for entry in entries.values())
    parts.append("};\n")
    return "".join(parts)


def catalog_path(folder: Path, file_stem: str) -> Path:
    return Path(folder) / f"{file_stem}{config.OUTPUT_EXTENSION}"


def save_text(target_file: Path, content: str) -> None:
    """Truncate-and-create target_file with content (UTF-8, LF line endings)."""
    try:
        with open(target_file, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
    except OSError as e:
        raise CatalogWriteError(f"Failed to write {target_file}: {e}", file_path=str(target_file)) from e


def write_catalog(folder: Path, entries: EntryMap, file_stem: str, allow_empty: bool = False,
                  echo: Optional[Callable[[str], None]] = print) -> WriteOutcome:
    """
    Write <folder>/<file_stem>.js, replacing any existing file.

    Args:
        folder: Target i18n folder
        entries: Entries to write
        file_stem: File name without extension (e.g. "fr" or "fr-CA")
        allow_empty: Write the module shell even when there are no entries
        echo: Receives the user-facing "Written"/"Skipping" notices

    Returns:
        WriteOutcome.WRITTEN, SKIPPED_EMPTY or FAILED
    """
    echo = echo or (lambda _message: None)
    target_file = catalog_path(folder, file_stem)

    if not entries and not allow_empty:
        echo(f"Skipping {target_file} (no entries to write)")
        return WriteOutcome.SKIPPED_EMPTY

    try:
        save_text(target_file, render_catalog(entries))
    except CatalogWriteError as e:
        logger.error(e.message)
        return WriteOutcome.FAILED

    logger.debug(f"Wrote {len(entries)} entries to {target_file}")
    echo(f"Written {target_file}")
    return WriteOutcome.WRITTEN
