"""briefli command line.

Run examples:
  briefli init
  briefli new "Kündigung Mietvertrag"
  briefli new -w "Projektanfrage"
  briefli build
  briefli list
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional

from briefli import __version__
from briefli.config import Settings, get_settings
from briefli.core.errors import BriefliError
from briefli.services.build_service import BuildService
from briefli.services.letter_service import LetterService, parse_new_args
from briefli.services.list_service import ListService
from briefli.services.scaffold_service import ScaffoldService

log = logging.getLogger("briefli.cli")

HELP = """\
briefli - Swiss letter management CLI

USAGE:
    briefli <command> [args]

COMMANDS:
    new [flags] <subject>   Create a new letter (YYYY-MM-DD Subject.typ)
    build                   Compile all .typ files to PDF
    list                    List all letters
    init                    Initialize a new letters directory
    help                    Show this help

FLAGS (for 'new'):
    -p, --private    Use private address (default)
    -w, --work       Use work address

    A subject is required: 'briefli new -w' alone is rejected.

EXAMPLES:
    briefli init
    briefli new "Kündigung Mietvertrag"
    briefli new -w "Projektanfrage"
    briefli build
"""

NEW_USAGE = "Usage: briefli new [-w|--work] <subject>  (the subject must not be empty)"

HELP_TOKENS = ("help", "--help", "-h")
VERSION_TOKENS = ("version", "--version", "-V")


def print_help() -> None:
    print(HELP)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _cmd_new(settings: Settings, args: List[str]) -> int:
    if not args:
        print(NEW_USAGE, file=sys.stderr)
        return 1

    profile, subject = parse_new_args(args)
    if not subject:
        print(NEW_USAGE, file=sys.stderr)
        return 1

    LetterService(settings).create(subject, profile)
    return 0


def _cmd_build(settings: Settings, args: List[str]) -> int:
    BuildService(settings).build_all()
    return 0


def _cmd_list(settings: Settings, args: List[str]) -> int:
    ListService(settings).list_letters()
    return 0


def _cmd_init(settings: Settings, args: List[str]) -> int:
    ScaffoldService(settings).init()
    return 0


COMMANDS: Dict[str, Callable[[Settings, List[str]], int]] = {
    "new": _cmd_new,
    "build": _cmd_build,
    "list": _cmd_list,
    "init": _cmd_init,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Description: Dispatch the first token to a briefli command.
    Layer: L0
    Input: argv without the program name (defaults to sys.argv[1:])
    Output: exit code (0 ok, 1 usage/precondition/write failure)
    """
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    _configure_logging(settings)

    if not args:
        print_help()
        return 0

    command, rest = args[0], args[1:]
    if command in HELP_TOKENS:
        print_help()
        return 0
    if command in VERSION_TOKENS:
        print(f"briefli {__version__}")
        return 0

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}", file=sys.stderr)
        print_help()
        return 1

    try:
        return handler(settings, rest)
    except BriefliError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.hint:
            print(exc.hint, file=sys.stderr)
        return 1
    except OSError as exc:
        log.debug("%s failed", command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
