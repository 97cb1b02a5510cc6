from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from core.request_context import RequestContext


class IPlugin(ABC):
    """Base interface for all LocForge plugins."""

    def __init__(self):
        self.config: Dict[str, Any] = {}

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        pass

    def configure(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Store engine options (model name, API key, prefixes...)."""
        self.config = dict(config or {})


class ITranslationEngine(IPlugin):
    """
    Interface for translation engines.

    An engine translates one string at a time. Requests carrying the same
    session id belong to the same conversation and may share context.
    """

    def create_request_context(self) -> RequestContext:
        """Scope opened around each translate() call. No-op by default."""
        return RequestContext(name=self.id)

    @abstractmethod
    def translate(self, session_id: str, target_label: str, text: str) -> str:
        """
        Translate text.

        Args:
            session_id: Conversation id, fixed for a whole run
            target_label: Target locale display name, e.g. "German (Austria)"
            text: English source text

        Returns:
            The translated text

        Raises:
            Exception: Any failure; callers substitute an error marker
        """
        pass

    def is_available(self) -> bool:
        return True
