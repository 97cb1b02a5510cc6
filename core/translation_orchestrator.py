"""
Translation orchestration.

For every catalog group: translate the merged English entries into the
target language (<code>.js), optionally drop an empty marker file for the
language's default country in the main Dev UI folder, then translate again
for each requested country and keep only what differs (<code>-<CC>.js).
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

import locforge_config as config
from core.catalog_scanner import scan_catalog_groups
from core.catalog_writer import catalog_path, write_catalog
from core.diff_engine import diff_translations
from core.locale_resolver import (
    LocaleTable,
    build_locale_label,
    default_locale_table,
    derive_language_code,
    find_default_country_code,
    sanitize_country_code,
    sanitize_country_list,
)
from core.translation_service import TranslationService
from locforge_enums import OutputKind, WriteOutcome
from locforge_logger import get_logger
from models.catalog_entry import EntryMap
from models.catalog_group import CatalogGroup
from models.run_report import GroupReport, RunReport

logger = get_logger("core.translation_orchestrator")

_UNRESOLVED = object()


def is_main_dev_ui_folder(folder: Path) -> bool:
    """True if folder's path ends with the main Dev UI i18n path."""
    tail = config.MAIN_DEV_UI_I18N
    return tuple(Path(folder).parts[-len(tail):]) == tail


class CatalogTranslator:
    """
    Drives translation of every catalog group under a root directory.

    Args:
        service: TranslationService wrapping the active engine
        target_language: Language name as typed by the user, e.g. "German"
        target_countries: Extra dialect country codes, e.g. ["AT", "CH"]
        locale_table: Locale data (Babel by default)
        echo: Receives user-facing progress lines (stdout by default)
    """

    def __init__(self, service: TranslationService, target_language: str,
                 target_countries: Iterable[str] = (),
                 locale_table: Optional[LocaleTable] = None,
                 echo: Callable[[str], None] = print):
        self.service = service
        self.target_language = target_language.strip()
        self.target_countries = sanitize_country_list(target_countries)
        self.locale_table = locale_table or default_locale_table()
        self.echo = echo
        self.language_code = derive_language_code(self.target_language, self.locale_table)
        self._default_country = _UNRESOLVED

    def run(self, root) -> RunReport:
        """
        Scan root and process each group in path order.

        Raises:
            CatalogScanError: If root cannot be walked (nothing is written)
        """
        groups = scan_catalog_groups(root)
        report = RunReport(root=Path(root))
        for folder in sorted(groups, key=str):
            report.groups.append(self._process_group_safely(groups[folder]))
        return report

    def _process_group_safely(self, group: CatalogGroup) -> GroupReport:
        try:
            return self.process_group(group)
        except Exception as e:
            logger.exception(f"Unexpected error while processing {group.directory}")
            return GroupReport(directory=group.directory, language_code=self.language_code, error=str(e))

    def process_group(self, group: CatalogGroup) -> GroupReport:
        folder = group.directory
        report = GroupReport(directory=folder, language_code=self.language_code,
                             source_entry_count=len(group.entries))
        failures_before = self.service.failure_count

        self.echo(f"\n== {folder} ==")
        base_file = catalog_path(folder, self.language_code)
        if base_file.exists():
            self.echo(f"Skipping {folder} because {base_file.name} already exists")
            report.skipped_reason = f"{base_file.name} already exists"
            report.add_output(base_file, OutputKind.BASE, WriteOutcome.SKIPPED_EXISTS)
            return report

        translated = self.translate_entries(group.entries, self.target_language, show_progress=True)
        outcome = write_catalog(folder, translated, self.language_code, echo=self.echo)
        report.add_output(base_file, OutputKind.BASE, outcome, len(translated))

        default_country = self.default_country()
        if default_country and is_main_dev_ui_folder(folder):
            stem = f"{self.language_code}-{default_country}"
            outcome = write_catalog(folder, {}, stem, allow_empty=True, echo=self.echo)
            report.add_output(catalog_path(folder, stem), OutputKind.DEFAULT_COUNTRY_MARKER, outcome)

        for country in self.target_countries:
            country_code = sanitize_country_code(country)
            if not country_code:
                continue
            if default_country and default_country.upper() == country_code.upper():
                logger.info(f"Skipping {country_code}: it is the default country for {self.language_code}")
                continue
            self._write_dialect(group, translated, country_code, report)

        report.translation_failures = self.service.failure_count - failures_before
        return report

    def _write_dialect(self, group: CatalogGroup, base_translated: EntryMap,
                       country_code: str, report: GroupReport) -> None:
        label = build_locale_label(self.language_code, country_code, self.locale_table)
        logger.info(f"Translating {len(group.entries)} entries for {label}")
        dialect = self.translate_entries(group.entries, label)
        diff = diff_translations(base_translated, dialect)
        stem = f"{self.language_code}-{country_code}"
        outcome = write_catalog(group.directory, diff, stem, allow_empty=False, echo=self.echo)
        report.add_output(catalog_path(group.directory, stem), OutputKind.DIALECT, outcome, len(diff))

    def translate_entries(self, entries: EntryMap, target_label: str, show_progress: bool = False) -> EntryMap:
        """Translate every entry value, keeping keys, order and template flags."""
        translated: EntryMap = {}
        for key, entry in entries.items():
            value = self.service.translate_value(entry.value, target_label)
            translated[key] = entry.with_value(value)
            if show_progress:
                self.echo(f"{key} = {entry.value} -> {value}")
        return translated

    def default_country(self) -> Optional[str]:
        """Sanitized default country for the target language, or None."""
        if self._default_country is _UNRESOLVED:
            country = find_default_country_code(self.language_code, self.target_language, self.locale_table)
            self._default_country = sanitize_country_code(country) or None
        return self._default_country
