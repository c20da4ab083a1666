"""Terminal front-end for the translation client."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from translation_app.client.controller import TranslationController
from translation_app.client.state import LanguageSelected, MessageChanged, ModelSelected
from translation_app.config import get_client_settings
from translation_app.errors import ConfigurationError
from translation_app.languages import MODELS, languages_for


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="translation-app", description="Translate text with a chosen model.")
    sub = parser.add_subparsers(dest="command", required=True)

    translate = sub.add_parser("translate", help="Translate a message")
    translate.add_argument("message", help="Text to translate (English)")
    translate.add_argument("-m", "--model", default="gemini-1.5-flash-001", choices=MODELS)
    translate.add_argument("-l", "--language", default="French", help="Target language")

    export = sub.add_parser("export", help="Download the translation log as CSV")
    export.add_argument("-o", "--output-dir", type=Path, default=Path("."))

    sub.add_parser("models", help="List models and their languages")
    return parser


async def run_translate(controller: TranslationController, args: argparse.Namespace) -> int:
    controller.dispatch(ModelSelected(args.model))
    controller.dispatch(LanguageSelected(args.language))
    controller.dispatch(MessageChanged(args.message))

    state = await controller.submit()
    await controller.wait_for_audit()

    if state.error:
        print(state.error, file=sys.stderr)
        return 1
    print(state.translation)
    return 0


async def run_export(controller: TranslationController, args: argparse.Namespace) -> int:
    path = await controller.export_csv(args.output_dir)
    if path is None:
        print(controller.state.error, file=sys.stderr)
        return 1
    print(f"Saved {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "models":
        for model in MODELS:
            print(f"{model}: {', '.join(languages_for(model))}")
        return 0

    try:
        settings = get_client_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    controller = TranslationController.from_settings(settings)
    if args.command == "translate":
        return asyncio.run(run_translate(controller, args))
    return asyncio.run(run_export(controller, args))


if __name__ == "__main__":
    sys.exit(main())
