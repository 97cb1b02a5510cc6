# -*- coding: utf-8 -*-
"""
LocForge Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path
from typing import Dict, List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# LOCALE FIXTURES
# =============================================================================

class FakeLocaleTable:
    """Small, fixed-order LocaleTable for deterministic tests."""

    def __init__(self, records=None, names=None):
        from core.locale_resolver import LocaleRecord
        rows = records if records is not None else [
            ("fr", "", "French"),
            ("fr", "CA", "French"),
            ("fr", "FR", "French"),
            ("de", "DE", "German"),
            ("de", "AT", "German"),
            ("de", "CH", "German"),
            ("es", "ES", "Spanish"),
            ("xx", "", "Blank Code"),
            ("", "", "Nameless"),
        ]
        self._records = [LocaleRecord(*row) for row in rows]
        self._names: Dict[tuple, str] = names if names is not None else {
            ("fr", ""): "French",
            ("fr", "CA"): "French (Canada)",
            ("de", ""): "German",
            ("de", "AT"): "German (Austria)",
            ("de", "CH"): "German (Switzerland)",
        }

    def records(self):
        return list(self._records)

    def display_name(self, language, territory=""):
        return self._names.get((language, territory), "")


@pytest.fixture
def locale_table():
    return FakeLocaleTable()


@pytest.fixture
def make_locale_table():
    """Factory for tables with custom rows."""
    return FakeLocaleTable


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

class RecordingEngine:
    """
    Translation engine double.

    Values found in `responses[(label, text)]` are returned as-is, a text in
    `failures` raises, anything else becomes "<label>:<text>".
    """

    def __init__(self, responses=None, failures=()):
        from core.request_context import RequestContext
        self.responses = responses or {}
        self.failures = set(failures)
        self.calls: List[tuple] = []
        self.activations = 0
        self.terminations = 0
        self.active_during_calls: List[bool] = []
        self._context = RequestContext(name="recording", on_activate=self._on_activate,
                                       on_terminate=self._on_terminate)
        self.id = "test.engine.recording"
        self.name = "Recording Engine"

    def _on_activate(self):
        self.activations += 1

    def _on_terminate(self):
        self.terminations += 1

    def create_request_context(self):
        return self._context

    def translate(self, session_id, target_label, text):
        self.calls.append((session_id, target_label, text))
        self.active_during_calls.append(self._context.is_active)
        if text in self.failures:
            raise RuntimeError(f"engine refused {text!r}")
        return self.responses.get((target_label, text), f"{target_label}:{text}")

    def is_available(self):
        return True


@pytest.fixture
def recording_engine():
    return RecordingEngine()


@pytest.fixture
def make_engine():
    """Factory for engines with canned responses/failures."""
    return RecordingEngine


# =============================================================================
# TEMP TREE FIXTURES
# =============================================================================

@pytest.fixture
def write_file(tmp_path):
    """Write text to a path relative to tmp_path, creating parents."""
    def _write(relative: str, content: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding='utf-8')
        return target
    return _write


@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh plugin registry and Gemini session state for every test."""
    from core.plugin_manager import PluginManager
    import locforge_ai
    PluginManager.reset_instance()
    locforge_ai.reset_sessions()
    locforge_ai.gemini_model = None
    locforge_ai._configured_model_name = None
    yield
    PluginManager.reset_instance()
    locforge_ai.reset_sessions()
    locforge_ai.gemini_model = None
    locforge_ai._configured_model_name = None
