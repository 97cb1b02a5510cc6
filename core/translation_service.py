import time
import uuid
from typing import Optional

import locforge_config as config
from core.request_context import RequestContext, activated
from interfaces.i_plugin import ITranslationEngine
from locforge_logger import get_logger

logger = get_logger("core.translation_service")


class TranslationService:
    """
    Facade over the active translation engine. Handles:
    1. A session id fixed for the whole run (shared conversational context)
    2. Request-scoped activation around every engine call
    3. Failure substitution: a failed request yields an in-band error marker
    """

    def __init__(self, engine: Optional[ITranslationEngine], session_id: Optional[str] = None,
                 request_delay: float = config.REQUEST_DELAY_SECONDS):
        self.engine = engine
        self.session_id = session_id or str(uuid.uuid4())
        self.request_delay = request_delay
        self.request_context: Optional[RequestContext] = engine.create_request_context() if engine else None
        self.request_count = 0
        self.failure_count = 0

    def translate_value(self, value: str, target_label: str) -> str:
        """
        Translate one value under target_label.

        Never raises: failures are logged and replaced by
        config.TRANSLATION_ERROR_MARKER so output files stay complete.
        """
        if self.engine is None:
            return config.SERVICE_UNAVAILABLE_MARKER

        if self.request_delay and self.request_count:
            time.sleep(self.request_delay)
        self.request_count += 1

        try:
            with activated(self.request_context):
                return self.engine.translate(self.session_id, target_label, value)
        except Exception as e:
            self.failure_count += 1
            logger.error(f'Failed to translate "{value}": {e}')
            return config.TRANSLATION_ERROR_MARKER
