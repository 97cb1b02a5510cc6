import locforge_ai
import locforge_config as config
from core.request_context import RequestContext
from interfaces.i_plugin import ITranslationEngine
from locforge_logger import get_logger

logger = get_logger("plugin.gemini")


class GeminiEngine(ITranslationEngine):
    """
    Google Gemini translation engine.

    Each session id maps to one Gemini chat, so every string translated in a
    run shares the conversation (terminology stays consistent).
    """

    @property
    def id(self) -> str:
        return "locforge.engine.gemini"

    @property
    def name(self) -> str:
        return "Google Gemini"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def model_name(self) -> str:
        return self.config.get("model") or config.DEFAULT_MODEL_NAME

    def _open(self) -> None:
        locforge_ai.configure_gemini(self.model_name, api_key=self.config.get("api_key"))

    def create_request_context(self) -> RequestContext:
        return RequestContext(name=self.id, on_activate=self._open)

    def translate(self, session_id: str, target_label: str, text: str) -> str:
        return locforge_ai.translate_with_gemini(session_id, target_label, text)

    def is_available(self) -> bool:
        return bool(self.config.get("api_key") or locforge_ai.load_api_key())
