from typing import Any, Dict, List, Optional, Type

from locforge_exceptions import EngineNotFoundError
from locforge_logger import get_logger
from interfaces.i_plugin import ITranslationEngine

logger = get_logger("core.plugin_manager")


def _built_in_engines() -> List[Type[ITranslationEngine]]:
    # Imported lazily so that importing the manager does not pull in SDKs
    from plugins.built_in.dummy_engine import DummyEngine
    from plugins.built_in.gemini_engine import GeminiEngine
    from plugins.built_in.google_translator import GoogleTranslatePlugin
    return [GeminiEngine, GoogleTranslatePlugin, DummyEngine]


class PluginManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PluginManager, cls).__new__(cls)
            cls._instance.engines = {}  # id -> instance
            cls._instance.failed_plugins = []  # List[Dict]
            cls._instance._initialized = False
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def initialize(self):
        if self._initialized:
            return

        self.engines.clear()
        self.failed_plugins.clear()

        for engine_cls in _built_in_engines():
            try:
                self._register_engine(engine_cls())
            except Exception as e:
                err = f"Failed to load engine {engine_cls.__name__}: {e}"
                logger.error(err)
                self.failed_plugins.append({"name": engine_cls.__name__, "error": str(e)})

        self._initialized = True
        logger.debug(f"PluginManager initialized. Loaded {len(self.engines)} engines.")

    def register(self, engine: ITranslationEngine):
        """Register an extra engine instance (third-party or test engines)."""
        self._register_engine(engine)

    def _register_engine(self, engine: ITranslationEngine):
        if engine.id in self.engines:
            logger.warning(f"Plugin ID collision: {engine.id}. Ignoring duplicate.")
            return

        logger.debug(f"Registering engine: {engine.name} ({engine.version})")
        self.engines[engine.id] = engine

    def get_engine(self, engine_id: str) -> Optional[ITranslationEngine]:
        return self.engines.get(engine_id)

    def get_all_engines(self) -> List[ITranslationEngine]:
        return list(self.engines.values())

    def create_engine(self, engine_id: str, config: Optional[Dict[str, Any]] = None) -> ITranslationEngine:
        """
        Look up an engine and hand it its configuration.

        Raises:
            EngineNotFoundError: If no engine with that id is registered
        """
        self.initialize()
        engine = self.get_engine(engine_id)
        if engine is None:
            raise EngineNotFoundError(engine_id)
        engine.configure(config)
        return engine
