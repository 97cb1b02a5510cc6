from interfaces.i_plugin import ITranslationEngine


class DummyEngine(ITranslationEngine):
    """
    A dummy translation engine for testing and dry runs.

    The "prefix" option may contain {label}, e.g. "[{label}] ".
    """

    @property
    def id(self) -> str:
        return "locforge.engine.dummy"

    @property
    def name(self) -> str:
        return "Dummy Engine (Test)"

    @property
    def version(self) -> str:
        return "1.0.0"

    def translate(self, session_id: str, target_label: str, text: str) -> str:
        prefix = self.config.get("prefix", "[TEST] ")
        return f"{prefix.format(label=target_label)}{text}"
