# -*- coding: utf-8 -*-
"""
End-to-end tests for CatalogTranslator using a recording engine and a
fixed locale table.
"""

from pathlib import Path

import pytest

import locforge_config as config
from core.catalog_scanner import normalize_path
from core.translation_orchestrator import CatalogTranslator, is_main_dev_ui_folder
from core.translation_service import TranslationService
from locforge_enums import OutputKind, WriteOutcome
from locforge_exceptions import CatalogScanError

DEV_UI_I18N = "extensions/devui/resources/src/main/resources/dev-ui/i18n"

SOURCE = "'greeting': 'Hello', 'welcome': str`Welcome ${0}`"


def _translator(engine, locale_table, language="German", countries=(), echo=None):
    return CatalogTranslator(TranslationService(engine), language, countries,
                             locale_table=locale_table, echo=echo or (lambda _message: None))


def _read(path: Path) -> str:
    return path.read_text(encoding='utf-8')


class TestIsMainDevUiFolder:

    def test_matches_path_suffix(self, tmp_path):
        assert is_main_dev_ui_folder(tmp_path / DEV_UI_I18N)

    def test_other_folders(self, tmp_path):
        assert not is_main_dev_ui_folder(tmp_path / "web" / "i18n")
        assert not is_main_dev_ui_folder(Path("i18n"))


class TestCatalogTranslator:

    def test_writes_base_catalog(self, write_file, tmp_path, recording_engine, locale_table):
        write_file("web/i18n/en.js", SOURCE)

        report = _translator(recording_engine, locale_table).run(tmp_path)

        assert _read(tmp_path / "web" / "i18n" / "de.js") == (
            "import { str } from '@lit/localize';\n"
            "\n"
            "export const templates = {\n"
            "    'greeting': 'German:Hello',\n"
            "    'welcome': str`German:Welcome ${0}`,\n"
            "};\n"
        )
        group = report.groups[0]
        assert group.language_code == "de"
        assert group.outcome_for("de.js") == WriteOutcome.WRITTEN
        # Not the main Dev UI folder: no default-country marker
        assert not (tmp_path / "web" / "i18n" / "de-DE.js").exists()

    def test_dialects_hold_only_differences(self, write_file, tmp_path, make_engine, locale_table):
        write_file("web/i18n/en.js", SOURCE)
        engine = make_engine(responses={
            ("German (Austria)", "Hello"): "German:Hello",
            ("German (Switzerland)", "Hello"): "German:Hello",
            ("German (Switzerland)", "Welcome ${0}"): "German:Welcome ${0}",
        })

        report = _translator(engine, locale_table, countries=["at", "CH"]).run(tmp_path)

        folder = tmp_path / "web" / "i18n"
        assert _read(folder / "de-AT.js") == (
            "import { str } from '@lit/localize';\n"
            "\n"
            "export const templates = {\n"
            "    'welcome': str`German (Austria):Welcome ${0}`,\n"
            "};\n"
        )
        assert not (folder / "de-CH.js").exists()
        group = report.groups[0]
        assert group.outcome_for("de-AT.js") == WriteOutcome.WRITTEN
        assert group.outcome_for("de-CH.js") == WriteOutcome.SKIPPED_EMPTY

    def test_default_country_is_not_translated_as_dialect(self, write_file, tmp_path,
                                                          recording_engine, locale_table):
        write_file("web/i18n/en.js", SOURCE)

        _translator(recording_engine, locale_table, countries=["DE", "AT"]).run(tmp_path)

        labels = {call[1] for call in recording_engine.calls}
        assert labels == {"German", "German (Austria)"}
        assert not (tmp_path / "web" / "i18n" / "de-DE.js").exists()

    def test_main_dev_ui_folder_gets_empty_marker(self, write_file, tmp_path,
                                                  recording_engine, locale_table):
        write_file(f"{DEV_UI_I18N}/en.js", SOURCE)

        report = _translator(recording_engine, locale_table).run(tmp_path)

        marker = tmp_path / DEV_UI_I18N / "de-DE.js"
        assert _read(marker) == "export const templates = {\n};\n"
        kinds = [record.kind for record in report.groups[0].outputs]
        assert kinds == [OutputKind.BASE, OutputKind.DEFAULT_COUNTRY_MARKER]

    def test_no_marker_without_default_country(self, write_file, tmp_path,
                                               recording_engine, locale_table):
        write_file(f"{DEV_UI_I18N}/en.js", SOURCE)

        _translator(recording_engine, locale_table, language="Klingon").run(tmp_path)

        folder = tmp_path / DEV_UI_I18N
        assert (folder / "kli.js").exists()
        assert sorted(path.name for path in folder.iterdir()) == ["en.js", "kli.js"]

    def test_existing_base_file_skips_group(self, write_file, tmp_path, recording_engine, locale_table):
        write_file("web/i18n/en.js", SOURCE)
        existing = write_file("web/i18n/de.js", "hand written")
        messages = []

        report = _translator(recording_engine, locale_table, countries=["AT"],
                             echo=messages.append).run(tmp_path)

        assert _read(existing) == "hand written"
        assert recording_engine.calls == []
        assert report.groups[0].skipped
        assert report.groups[0].outcome_for("de.js") == WriteOutcome.SKIPPED_EXISTS
        folder = normalize_path(tmp_path / "web" / "i18n")
        assert f"Skipping {folder} because de.js already exists" in messages

    def test_failed_translations_are_marked(self, write_file, tmp_path, make_engine, locale_table):
        write_file("web/i18n/en.js", SOURCE)
        engine = make_engine(failures={"Hello"})

        report = _translator(engine, locale_table).run(tmp_path)

        content = _read(tmp_path / "web" / "i18n" / "de.js")
        assert f"'greeting': '{config.TRANSLATION_ERROR_MARKER}'," in content
        assert "German:Welcome ${0}" in content
        assert report.translation_failures == 1

    def test_groups_run_in_path_order(self, write_file, tmp_path, recording_engine, locale_table):
        write_file("b/i18n/en.js", "'b': 'B'")
        write_file("a/i18n/en.js", "'a': 'A'")
        messages = []

        report = _translator(recording_engine, locale_table, echo=messages.append).run(tmp_path)

        headers = [message for message in messages if message.startswith("\n== ")]
        assert headers == [
            f"\n== {normalize_path(tmp_path / 'a' / 'i18n')} ==",
            f"\n== {normalize_path(tmp_path / 'b' / 'i18n')} ==",
        ]
        assert [call[2] for call in recording_engine.calls] == ["A", "B"]
        assert len(report.written_files) == 2

    def test_group_order_compares_whole_path_strings(self, write_file, tmp_path,
                                                     recording_engine, locale_table):
        write_file("b/c/i18n/en.js", "'x': 'X'")
        write_file("b-c/i18n/en.js", "'y': 'Y'")

        report = _translator(recording_engine, locale_table).run(tmp_path)

        assert [group.directory for group in report.groups] == [
            normalize_path(tmp_path / "b-c" / "i18n"),
            normalize_path(tmp_path / "b" / "c" / "i18n"),
        ]

    def test_progress_lines(self, write_file, tmp_path, recording_engine, locale_table):
        write_file("web/i18n/en.js", "'greeting': 'Hello'")
        messages = []

        _translator(recording_engine, locale_table, echo=messages.append).run(tmp_path)

        assert "greeting = Hello -> German:Hello" in messages

    def test_empty_group_writes_nothing(self, write_file, tmp_path, recording_engine, locale_table):
        write_file("web/i18n/en.js", "export const templates = {};")

        report = _translator(recording_engine, locale_table).run(tmp_path)

        assert not (tmp_path / "web" / "i18n" / "de.js").exists()
        assert report.groups[0].outcome_for("de.js") == WriteOutcome.SKIPPED_EMPTY

    def test_unexpected_error_is_reported_per_group(self, write_file, tmp_path,
                                                    recording_engine, locale_table, monkeypatch):
        write_file("a/i18n/en.js", "'a': 'A'")
        write_file("b/i18n/en.js", "'b': 'B'")
        translator = _translator(recording_engine, locale_table)
        original = translator.process_group

        def flaky(group):
            if group.directory.parent.name == "a":
                raise RuntimeError("disk on fire")
            return original(group)

        monkeypatch.setattr(translator, "process_group", flaky)
        report = translator.run(tmp_path)

        assert [group.failed for group in report.groups] == [True, False]
        assert report.groups[0].error == "disk on fire"
        assert (tmp_path / "b" / "i18n" / "de.js").exists()
        assert "FAILED" in report.summary_lines()[0]

    def test_missing_root(self, tmp_path, recording_engine, locale_table):
        with pytest.raises(CatalogScanError):
            _translator(recording_engine, locale_table).run(tmp_path / "missing")

    def test_language_code_fallback(self, recording_engine, locale_table):
        translator = _translator(recording_engine, locale_table, language="  ")
        assert translator.language_code == "translation"
        assert translator.default_country() is None
