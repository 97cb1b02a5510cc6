import sys
import argparse
import logging
from pathlib import Path

from locforge_logger import get_logger, set_console_level
logger = get_logger("main")

import locforge_config as config
import locforge_ai
from locforge_settings import load_settings
from locforge_exceptions import CatalogScanError, EngineNotFoundError
from core.locale_resolver import sanitize_country_list
from core.plugin_manager import PluginManager
from core.translation_orchestrator import CatalogTranslator
from core.translation_service import TranslationService


def prompt(message, required=True):
    """Read one line from the console. Closed input ends the program unless optional."""
    try:
        return input(message)
    except EOFError:
        if not required:
            return ""
        raise SystemExit("No input available; pass the value on the command line.")


def resolve_root_directory(root):
    resolved = Path(root) if root else None
    while resolved is None:
        answer = prompt("Enter the path to the source root: ").strip()
        if not answer:
            print("A source path is required.", file=sys.stderr)
            continue
        candidate = Path(answer)
        if candidate.is_dir():
            resolved = candidate
        else:
            print(f"Path {candidate} is not a directory. Please try again.", file=sys.stderr)
    return resolved


def resolve_target_language(language):
    while not language or not language.strip():
        language = prompt("Which language are we translating to? ")
        if not language or not language.strip():
            print("Please enter a language to translate to.", file=sys.stderr)
    return language.strip()


def resolve_target_countries(countries):
    if countries:
        return sanitize_country_list(countries)
    answer = prompt("Optional comma separated country codes (excluding the default): ", required=False)
    if not answer or not answer.strip():
        return []
    return sanitize_country_list(answer.split(","))


def split_countries(value):
    """argparse type for -c AT,CH,BE."""
    return [part for part in value.split(",") if part.strip()]


def build_arg_parser(settings):
    parser = argparse.ArgumentParser(
        prog="locforge",
        description="Find English UI-string catalogs, merge them per i18n folder and write translated catalogs.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    parser.add_argument(
        "root",
        help="Root directory to scan recursively (prompted for when omitted).",
        nargs='?',
        default=None
    )
    parser.add_argument(
        "-l", "--language",
        default=settings.get("target_language"),
        help="Target language to translate values into, e.g. 'German'."
    )
    parser.add_argument(
        "-c", "--countries",
        type=split_countries,
        default=None,
        help="Optional comma separated country codes for dialect files (e.g. AT,CH,BE,LI,LU)."
    )
    parser.add_argument(
        "--engine",
        default=settings.get("engine", config.DEFAULT_ENGINE_ID),
        help="Translation engine id."
    )
    parser.add_argument(
        "--model",
        default=settings.get("model", config.DEFAULT_MODEL_NAME),
        help="Model name for AI engines."
    )
    parser.add_argument(
        "--session-id",
        default=None,
        help="Conversation id shared by all requests of the run (random when omitted)."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on the console."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.VERSION}"
    )
    return parser


def create_engine(engine_id, model, settings):
    engine_config = {"model": model, "api_key": settings.get("api_key")}
    engine = PluginManager().create_engine(engine_id, engine_config)
    if not engine.is_available() and engine_id == "locforge.engine.gemini" and sys.stdin.isatty():
        engine_config["api_key"] = locforge_ai.prompt_for_api_key()
        engine.configure(engine_config)
    return engine


def main(argv=None):
    settings = load_settings()
    args = build_arg_parser(settings).parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    root = resolve_root_directory(args.root)
    language = resolve_target_language(args.language)
    countries = resolve_target_countries(args.countries if args.countries is not None
                                         else settings.get("target_countries"))

    if not root.is_dir():
        print(f"Path {root} is not a directory", file=sys.stderr)
        return 1

    try:
        engine = create_engine(args.engine, args.model, settings)
    except EngineNotFoundError as e:
        manager = PluginManager()
        known = ", ".join(sorted(engine.id for engine in manager.get_all_engines()))
        print(f"{e.message}. Available engines: {known}", file=sys.stderr)
        for failed in manager.failed_plugins:
            print(f"  {failed['name']} failed to load: {failed['error']}", file=sys.stderr)
        return 2

    if not engine.is_available():
        logger.error(f"Engine '{engine.name}' is not available (missing API key?).")
        return 1

    logger.info(f"Translating to {language} with {engine.name}"
                + (f", dialects: {', '.join(countries)}" if countries else ""))

    service = TranslationService(engine, session_id=args.session_id)
    translator = CatalogTranslator(service, language, countries)
    try:
        report = translator.run(root)
    except CatalogScanError as e:
        print(e.message, file=sys.stderr)
        return 1

    print()
    for line in report.summary_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
