from pathlib import Path

VERSION = "0.4.0"

# English catalogs that get merged into one canonical catalog per i18n folder
CATALOG_FILE_NAMES = ("en.js", "en-US.js", "en-GB.js")
I18N_MARKER_DIR = "i18n"
OUTPUT_EXTENSION = ".js"

# The main Dev UI catalog also receives an empty marker file for the default country
MAIN_DEV_UI_I18N = ("extensions", "devui", "resources", "src", "main", "resources", "dev-ui", "i18n")

TEMPLATE_IMPORT_LINE = "import { str } from '@lit/localize';"
EXPORT_NAME = "templates"
INDENT = "    "

FALLBACK_LANGUAGE_CODE = "translation"
MAX_CODE_LENGTH = 3

TRANSLATION_ERROR_MARKER = "<translation error>"
SERVICE_UNAVAILABLE_MARKER = "<translation service unavailable>"

DEFAULT_ENGINE_ID = "locforge.engine.gemini"
DEFAULT_MODEL_NAME = "gemini-2.0-flash"

# Pause between two translation requests (seconds)
REQUEST_DELAY_SECONDS = 0
# Messages kept in a Gemini chat session (user + model turns)
SESSION_MEMORY_MESSAGES = 10
GEMINI_MAX_RETRIES = 4

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

SETTINGS_DIR = Path.home() / ".locforge"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

TRANSLATION_SYSTEM_PROMPT = (
    "You translate English UI strings, used in Quarkus Dev UI, to the requested language.\n"
    "You might receive numbered variables, like ${0} - take this into account when doing the "
    "translation as the variable might move position in the sentence for the new language. "
    "Also note that some terms (especially technical terms), eg \"Beans\" in the context of the "
    "ArC extension, do not translate.\n"
    "Return only the translated text."
)

__all__ = [
    "VERSION",
    "CATALOG_FILE_NAMES", "I18N_MARKER_DIR", "OUTPUT_EXTENSION", "MAIN_DEV_UI_I18N",
    "TEMPLATE_IMPORT_LINE", "EXPORT_NAME", "INDENT",
    "FALLBACK_LANGUAGE_CODE", "MAX_CODE_LENGTH",
    "TRANSLATION_ERROR_MARKER", "SERVICE_UNAVAILABLE_MARKER",
    "DEFAULT_ENGINE_ID", "DEFAULT_MODEL_NAME",
    "REQUEST_DELAY_SECONDS", "SESSION_MEMORY_MESSAGES", "GEMINI_MAX_RETRIES",
    "API_KEY_ENV_VARS", "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "TRANSLATION_SYSTEM_PROMPT",
]

# Import logger at the end to avoid circular imports
from locforge_logger import get_logger
_logger = get_logger("config")
_logger.debug("locforge_config.py loaded")
