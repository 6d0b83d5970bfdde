"""CLI for libretranslate-client - translate text from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, Mapping

from .config import get_default_config, merge_config
from .translation import (
    FormatError,
    Language,
    TranslateError,
    TranslationBuilder,
    detect,
)

__all__ = ["load_config", "main"]

ENV_URL = "LIBRETRANSLATE_URL"
ENV_API_KEY = "LIBRETRANSLATE_API_KEY"


def load_config(environ: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """Build the CLI configuration from defaults and environment overrides."""
    environ = os.environ if environ is None else environ
    override: Dict[str, Any] = {"translation": {}}
    if environ.get(ENV_URL):
        override["translation"]["url"] = environ[ENV_URL]
    if environ.get(ENV_API_KEY):
        override["translation"]["api_key"] = environ[ENV_API_KEY]
    return merge_config(get_default_config(), override)


# =============================================================================
# Subcommand: translate
# =============================================================================

def cmd_translate(args: argparse.Namespace) -> int:
    """Translate text between two languages."""
    try:
        source = Language.parse(args.source)
        target = Language.parse(args.target)
    except FormatError as e:
        print(f"Error: {e.text} is not a valid language.", file=sys.stderr)
        return 1

    builder = TranslationBuilder().url(args.url).from_lang(source).to_lang(target).text(args.text)
    if args.key:
        builder = builder.key(args.key)

    try:
        result = builder.translate()
    except TranslateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result.output)
    return 0


# =============================================================================
# Subcommand: detect
# =============================================================================

def cmd_detect(args: argparse.Namespace) -> int:
    """Detect the language of text."""
    try:
        lang = detect(args.text)
    except TranslateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{lang.pretty} ({lang.code})")
    return 0


# =============================================================================
# Subcommand: languages
# =============================================================================

def cmd_languages(args: argparse.Namespace) -> int:
    """List supported languages."""
    for lang in Language:
        print(f"{lang.code}: {lang.pretty}")
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    config = load_config()["translation"]

    parser = argparse.ArgumentParser(
        prog="libretranslate-client",
        description="Translate text with a LibreTranslate server.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument("source", help="Source language code or name ('auto' to detect)")
    translate_parser.add_argument("target", help="Target language code or name")
    translate_parser.add_argument("text", help="Text to translate")
    translate_parser.add_argument(
        "--url",
        default=config["url"],
        help=f"Translation server base URL (env: {ENV_URL})",
    )
    translate_parser.add_argument(
        "--key",
        default=config["api_key"],
        help=f"API key (env: {ENV_API_KEY})",
    )
    translate_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output the full result as JSON",
    )
    translate_parser.set_defaults(func=cmd_translate)

    # detect command
    detect_parser = subparsers.add_parser("detect", help="Detect the language of text")
    detect_parser.add_argument("text", help="Text to inspect")
    detect_parser.set_defaults(func=cmd_detect)

    # languages command
    languages_parser = subparsers.add_parser("languages", help="List supported languages")
    languages_parser.set_defaults(func=cmd_languages)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
