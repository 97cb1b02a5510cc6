import os
import random
import time

from locforge_logger import get_logger
logger = get_logger("ai")

import locforge_config as config
import locforge_settings as settings_store
from locforge_exceptions import APIKeyError, ModelError, TranslationError, NetworkError
from parser.patterns import CatalogPatterns

genai = None
gemini_model = None
_configured_model_name = None
_chat_sessions = {}

SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"},
]

RETRYABLE_KEYWORDS = [
    "429", "503", "quota", "rate", "limit", "timeout",
    "deadline", "unavailable", "resource exhausted",
]
NETWORK_ERROR_KEYWORDS = [
    "deadline exceeded", "timeout", "connection refused", "network is unreachable",
    "dns lookup", "unavailable", "service unavailable",
]
AUTH_ERROR_KEYWORDS = ["api key", "permission denied", "authentication", "403", "401"]


def _lazy_import_genai():

    global genai

    if genai is None:
        try:
            logger.debug("Lazy importing google.generativeai...")
            import google.generativeai as genai_local
            genai = genai_local
            logger.debug("Lazy import successful: google.generativeai")
        except ImportError as e:
            raise ModelError("google-generativeai is not installed (pip install google-generativeai)") from e
    return genai


def load_api_key(settings=None):
    """API key from GEMINI_API_KEY / GOOGLE_API_KEY, then from the settings file."""

    for env_var in config.API_KEY_ENV_VARS:
        key = os.environ.get(env_var, "").strip()
        if key:
            logger.debug(f"[load_api_key] Using key from ${env_var} (ends with ...{key[-4:]}).")
            return key

    settings = settings if settings is not None else settings_store.load_settings()
    key = settings.get("api_key")
    if isinstance(key, str) and key.strip():
        masked_key = f"...{key[-4:]}" if len(key) >= 4 else key
        logger.debug(f"[load_api_key] Found key in settings ending with {masked_key}.")
        return key.strip()

    logger.debug("[load_api_key] No API key configured.")
    return None


def save_api_key(api_key):
    """Store (or with a blank value, remove) the API key in the settings file."""

    settings = settings_store.load_settings()
    if api_key:
        if settings.get("api_key") == api_key:
            return "unchanged"
        settings["api_key"] = api_key
        action_taken = "saved"
    else:
        if settings.get("api_key") is None:
            return "unchanged"
        settings.pop("api_key", None)
        action_taken = "removed"

    if settings_store.save_settings(settings):
        logger.info(f"API key {action_taken}.")
        return action_taken
    logger.error("Error saving settings file during API key update.")
    return "error"


def prompt_for_api_key():
    """Ask for a Gemini API key on the console and persist it."""

    logger.info("Google Gemini API key required.")
    while True:
        try:
            new_key = input("Enter your Google Gemini API key: ").strip()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input cancelled.")
            return None
        if new_key:
            save_api_key(new_key)
            return new_key
        logger.warning("Key cannot be empty.")


def _classify_error(e):
    """Map an SDK exception onto the LocForge AI error hierarchy."""
    error_str = str(e).lower()
    if any(keyword in error_str for keyword in AUTH_ERROR_KEYWORDS):
        return APIKeyError(f"Gemini rejected the API key: {e}")
    if any(keyword in error_str for keyword in NETWORK_ERROR_KEYWORDS):
        return NetworkError(f"Could not reach the Gemini API: {e}")
    return None


def configure_gemini(model_name_to_use=None, api_key=None):
    """
    Configure the SDK and create the model object (once per model name).

    Raises:
        APIKeyError: No API key available
        ModelError: SDK missing or model creation failed
    """

    global gemini_model, _configured_model_name

    model_name_to_use = model_name_to_use or config.DEFAULT_MODEL_NAME
    if gemini_model is not None and _configured_model_name == model_name_to_use:
        logger.debug(f"Skipping configure_gemini: Already configured for {model_name_to_use}")
        return gemini_model

    genai_module = _lazy_import_genai()

    api_key = api_key or load_api_key()
    if not api_key:
        raise APIKeyError("Gemini API key not found. Set GEMINI_API_KEY or add 'api_key' to the settings file.")

    try:
        genai_module.configure(api_key=api_key)
        gemini_model = genai_module.GenerativeModel(
            model_name_to_use,
            system_instruction=config.TRANSLATION_SYSTEM_PROMPT,
        )
    except Exception as e:
        gemini_model = None
        _configured_model_name = None
        classified = _classify_error(e)
        if classified:
            raise classified from e
        raise ModelError(f"Could not create Gemini model '{model_name_to_use}': {e}", model_name=model_name_to_use) from e

    _configured_model_name = model_name_to_use
    _chat_sessions.clear()
    logger.info(f"Model '{model_name_to_use}' object created successfully.")
    return gemini_model


def get_chat_session(session_id):
    """Chat session for a conversation id, created on first use."""
    if gemini_model is None:
        raise ModelError("Gemini model not initialized")
    chat = _chat_sessions.get(session_id)
    if chat is None:
        chat = gemini_model.start_chat(history=[])
        _chat_sessions[session_id] = chat
        logger.debug(f"Started Gemini chat session {session_id}")
    return chat


def trim_session_history(chat, max_messages=None):
    """Keep only the latest messages so long runs do not grow the prompt without bound."""
    max_messages = max_messages or config.SESSION_MEMORY_MESSAGES
    history = list(chat.history)
    if len(history) > max_messages:
        # Keep whole user/model turns
        keep = max_messages - (max_messages % 2)
        chat.history = history[-keep:]


def reset_sessions():
    _chat_sessions.clear()


def build_translation_prompt(language, text):
    return (
        f"Translate the following UI string to {language}. "
        f"Return only the translated text.\n\n{text}"
    )


def validate_placeholders_preserved(original, translated):
    """Placeholder numbers present in the original but missing from the translation."""
    return sorted(CatalogPatterns.placeholder_indices(original) - CatalogPatterns.placeholder_indices(translated))


def _send_with_backoff(chat, prompt, max_retries=None):
    """
    Send a chat message with exponential backoff + jitter on rate limits/errors.

    Returns:
        Tuple of (response_text, error_message)
    """
    max_retries = max_retries or config.GEMINI_MAX_RETRIES
    last_error = None

    for attempt in range(max_retries):
        try:
            response = chat.send_message(prompt, safety_settings=SAFETY_SETTINGS)
            if not response.parts:
                logger.warning(f"[_send_with_backoff] Empty response (attempt {attempt+1})")
                last_error = "Empty response from Gemini"
                if attempt + 1 < max_retries:
                    time.sleep(1)
                    continue
                return (None, last_error)
            return (response.text.strip(), None)

        except Exception as e:
            error_str = str(e).lower()
            last_error = str(e)
            is_retryable = any(keyword in error_str for keyword in RETRYABLE_KEYWORDS)

            if is_retryable and attempt + 1 < max_retries:
                delay = min(2 ** attempt + random.uniform(0, 1), 30)
                logger.warning(f"[_send_with_backoff] Rate limit/error, retrying in {delay:.1f}s: {e}")
                time.sleep(delay)
                continue

            logger.error(f"[_send_with_backoff] Final error: {e}")
            return (None, last_error)

    return (None, last_error or "Max retries exceeded")


def translate_with_gemini(session_id, language, text):
    """
    Translate one string inside the conversation identified by session_id.

    Raises:
        TranslationError: The request failed after retries or came back empty
    """
    chat = get_chat_session(session_id)
    response_text, error = _send_with_backoff(chat, build_translation_prompt(language, text))
    trim_session_history(chat)

    if error:
        raise TranslationError(error, source_text=text, target_lang=language)

    missing = validate_placeholders_preserved(text, response_text)
    if missing:
        logger.warning(f"Translation to {language} dropped placeholder(s) {missing}: {response_text!r}")
    return response_text
