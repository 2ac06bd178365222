"""
zeroshot entry point.

This file handles startup concerns (arg-parsing, logging) and dispatches to the prompt composer,
the turn parser, or the HTTP API.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from pydantic import (
    TypeAdapter,
    ValidationError,
)

from zeroshot.agent.prompt_composer import render
from zeroshot.agent.turn_parser import parse
from zeroshot.common import (
    OUTCOME_COLORS,
    colored_print,
)
from zeroshot.config import settings
from zeroshot.core.schema import (
    ActionRequest,
    FinalAnswer,
    Tool,
    Transcript,
)

logger = logging.getLogger(__name__)

_TOOLS_ADAPTER = TypeAdapter(List[Tool])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _init_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        stream=sys.stderr,  # stdout carries command output
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zero-shot ReAct prompt composer and turn parser")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        type=str.lower,
        default=settings.LOG_LEVEL,
        help="Logging level (default from env: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Print the prompt for the next model turn")
    render_cmd.add_argument(
        "--tools", type=Path, required=True, help='JSON file: [{"name": ..., "description": ...}]'
    )
    render_cmd.add_argument("--question", required=True, help="The user's question")
    render_cmd.add_argument(
        "--transcript", type=Path, default=None, help='JSON file: {"steps": [...]} (optional)'
    )

    parse_cmd = sub.add_parser("parse", help="Classify one model turn and print it as JSON")
    parse_cmd.add_argument(
        "file", nargs="?", type=Path, default=None, help="Turn text file (default: stdin)"
    )

    sub.add_parser("serve", help="Run the HTTP API")
    return parser


def _render(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        tools = _TOOLS_ADAPTER.validate_json(args.tools.read_text(encoding="utf-8"))
        transcript = (
            Transcript.model_validate_json(args.transcript.read_text(encoding="utf-8"))
            if args.transcript
            else Transcript()
        )
    except (OSError, ValidationError) as exc:
        parser.error(f"cannot load input: {exc}")
    print(render(tools, transcript, args.question))


def _parse(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        text = args.file.read_text(encoding="utf-8") if args.file else sys.stdin.read()
    except OSError as exc:
        parser.error(f"cannot read turn: {exc}")
    outcome = parse(text)
    if isinstance(outcome, FinalAnswer):
        headline = "Final answer"
    elif isinstance(outcome, ActionRequest):
        headline = f"Action: {outcome.action}"
    else:
        headline = outcome.message
    colored_print(headline, OUTCOME_COLORS[outcome.kind], file=sys.stderr)
    print(outcome.model_dump_json(indent=2))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the zeroshot command.

    Sets up logging and runs one of the ``render``, ``parse`` or ``serve`` sub-commands.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Override log level setting with command-line argument
    settings.LOG_LEVEL = args.log_level
    _init_logging(settings.LOG_LEVEL)
    logger.debug("Settings: %s", settings.model_dump())

    if args.command == "render":
        _render(parser, args)
    elif args.command == "parse":
        _parse(parser, args)
    else:
        # Lazy import to avoid web dependencies if not needed
        from zeroshot.api.app import run_api  # pylint: disable=import-outside-toplevel

        run_api(reload=settings.DEBUG)


if __name__ == "__main__":
    main()
