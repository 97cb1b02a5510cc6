from typing import Dict

from interfaces.i_plugin import ITranslationEngine
from locforge_exceptions import TranslationError
from locforge_logger import get_logger

logger = get_logger("plugin.google")


def label_to_language(target_label: str) -> str:
    """'German (Austria)' -> 'german'. Google Translate has no regional variants for most languages."""
    return target_label.split("(", 1)[0].strip().lower()


class GoogleTranslatePlugin(ITranslationEngine):
    """
    Google Translate (Free) engine using deep-translator.

    Stateless: the session id is ignored.
    """

    def __init__(self):
        super().__init__()
        self._translators: Dict[str, object] = {}

    @property
    def id(self) -> str:
        return "locforge.engine.google_free"

    @property
    def name(self) -> str:
        return "Google Translate (Free)"

    @property
    def version(self) -> str:
        return "1.0.0"

    def _get_translator(self, language: str):
        translator = self._translators.get(language)
        if translator is None:
            from deep_translator import GoogleTranslator
            translator = GoogleTranslator(source=self.config.get("source", "en"), target=language)
            self._translators[language] = translator
        return translator

    def translate(self, session_id: str, target_label: str, text: str) -> str:
        if not text:
            return ""
        language = label_to_language(target_label)
        try:
            translated = self._get_translator(language).translate(text)
        except Exception as e:
            logger.error(f"Google Translation to {language} failed: {e}")
            raise TranslationError(str(e), source_text=text, target_lang=language) from e
        if translated is None:
            raise TranslationError("Empty response from Google Translate", source_text=text, target_lang=language)
        return translated
