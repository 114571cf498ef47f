"""snip CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .errors import SnipError
from .executor import run_command
from .fzf import pick_with_fzf
from .picker import Selected, run_picker
from .store import Snippet, SnippetStore, default_store_path, reset_store

LOG = logging.getLogger("snip.cli")

EMPTY_HINT = 'no snippets yet. run: snip "your command"'


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snip",
        description="Record shell commands and pick them back later",
    )
    parser.add_argument(
        "--db",
        type=Path,
        help="Path to the snippet database (default $SNIP_HOME/snip.db or the user data dir)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SNIP_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    parser.add_argument("--fzf", action="store_true", help="Pick through fzf instead of the built-in picker")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--list", action="store_true", help="Print every recorded snippet")
    mode.add_argument("--search", metavar="QUERY", help="Print snippets containing QUERY")
    mode.add_argument("--drop", action="store_true", help="Delete the snippet database")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to record and run; omit to open the picker",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    if args.command and (args.list or args.search is not None or args.drop):
        parser.error("a command cannot be combined with --list, --search or --drop")
    try:
        return _dispatch(args)
    except SnipError as exc:
        LOG.debug("fatal error", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 130


def _dispatch(args: argparse.Namespace) -> int:
    if args.drop:
        return _drop(args.db)
    with SnippetStore.open(args.db) as store:
        if args.command:
            command = " ".join(args.command)
            store.save(command)
            return _execute(command)
        if args.list:
            _print_snippets(store.list())
            return 0
        if args.search is not None:
            _print_snippets(store.search(args.search))
            return 0
        return _pick(store, use_fzf=args.fzf)


def _drop(path: Optional[Path]) -> int:
    target = path or default_store_path()
    if reset_store(target):
        print(f"Database dropped: {target}")
    else:
        print(f"No database found at {target}")
    return 0


def _pick(store: SnippetStore, *, use_fzf: bool) -> int:
    snippets = store.list()
    if not snippets:
        print(EMPTY_HINT)
        return 0
    if use_fzf:
        chosen = pick_with_fzf(snippets)
    else:
        outcome = run_picker(store, snippets)
        chosen = outcome.snippet if isinstance(outcome, Selected) else None
    if chosen is None:
        return 0
    return _execute(chosen.command)


def _execute(command: str) -> int:
    code = run_command(command)
    if code != 0:
        print("command exited with non-zero status")
    return code


def _print_snippets(snippets: List[Snippet]) -> None:
    for snippet in snippets:
        print(f"{snippet.id:>5}  {snippet.created_at}  {snippet.command}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
