"""Command-line interface for winsplit.

WHY: When a Windows program receives the wrong arguments, the quickest check
is to see how each parser splits the exact command line. The CLI exposes
split, quote and join for every dialect, plus a conformance check against
recorded reference cases.

HOW: argparse with one subcommand per operation. Results go to stdout (JSON
for split, one line per token for quote); status and errors go to stderr.
Defaults for dialect, encoding and log level come from winsplit.config.

RULES:
- winsplit split [COMMAND_LINE] [-d DIALECT] [--lines]
    Reads stdin when COMMAND_LINE is omitted or "-". One trailing newline
    is stripped from stdin input.
- winsplit quote TOKEN... [-d DIALECT]
- winsplit join TOKEN... [-d DIALECT]
- winsplit check [CASE_FILE]   (bundled reference cases when omitted)
- Exit codes: 0 = success, 1 = error or failed cases, 2 = usage error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import winsplit
from winsplit.config import DEFAULT_ENCODING, LOG_LEVEL, load_default_dialect
from winsplit.conformance import load_cases, load_reference_cases, run_cases
from winsplit.dialects import DIALECT_ALIASES
from winsplit.errors import WinsplitError

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _read_stdin() -> bytes:
    data = sys.stdin.buffer.read()
    if data.endswith(b"\r\n"):
        return data[:-2]
    if data.endswith(b"\n"):
        return data[:-1]
    return data


def _dialect(args: argparse.Namespace) -> winsplit.Dialect:
    if args.dialect:
        return winsplit.resolve_dialect(args.dialect)
    return load_default_dialect()


def _cmd_split(args: argparse.Namespace) -> int:
    dialect = _dialect(args)
    if args.command_line is None or args.command_line == "-":
        tokens = winsplit.split_bytes(dialect, _read_stdin(), args.encoding)
    else:
        tokens = winsplit.split(dialect, args.command_line)
    logger.debug("Split into %d tokens using %s", len(tokens), dialect.value)

    if args.lines:
        for token in tokens:
            print(token)
    else:
        print(json.dumps(tokens, ensure_ascii=False))
    return 0


def _cmd_quote(args: argparse.Namespace) -> int:
    dialect = _dialect(args)
    for token in args.tokens:
        print(winsplit.quote(dialect, token))
    return 0


def _cmd_join(args: argparse.Namespace) -> int:
    dialect = _dialect(args)
    print(winsplit.join(dialect, args.tokens))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    if args.case_file:
        cases = load_cases(args.case_file, encoding=args.encoding)
        source = args.case_file
    else:
        cases = load_reference_cases()
        source = "bundled reference cases"

    _status("Checking {} ({} cases)...".format(source, len(cases)))
    report = run_cases(cases)
    for result in report.failed:
        _status("  FAIL {}".format(result.case.label))
        _status("    expected: {!r}".format(result.case.expected))
        _status("    actual:   {!r}".format(result.actual))
    _status(report.summary())
    return 0 if report.ok else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without running
    a command.
    """
    dialect_help = "Dialect name (default: WINSPLIT_DEFAULT_DIALECT or vc2008). " \
                   "Known names: {}.".format(", ".join(sorted(DIALECT_ALIASES)))

    parser = argparse.ArgumentParser(
        prog="winsplit",
        description="Split and quote Windows command lines using VC2008, "
                    "cmd.exe or PowerShell rules.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level name (default: %(default)s).",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Encoding for stdin and case files (default: %(default)s).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    split_parser = subparsers.add_parser("split", help="Split a command line into arguments.")
    split_parser.add_argument(
        "command_line",
        nargs="?",
        default=None,
        help='Command line to split. Reads stdin when omitted or "-".',
    )
    split_parser.add_argument("-d", "--dialect", default=None, help=dialect_help)
    split_parser.add_argument(
        "--lines",
        action="store_true",
        help="Print one token per line instead of a JSON array.",
    )
    split_parser.set_defaults(handler=_cmd_split)

    quote_parser = subparsers.add_parser("quote", help="Quote each token on its own line.")
    quote_parser.add_argument("tokens", nargs="+", metavar="TOKEN")
    quote_parser.add_argument("-d", "--dialect", default=None, help=dialect_help)
    quote_parser.set_defaults(handler=_cmd_quote)

    join_parser = subparsers.add_parser("join", help="Quote tokens and join them into one command line.")
    join_parser.add_argument("tokens", nargs="*", metavar="TOKEN")
    join_parser.add_argument("-d", "--dialect", default=None, help=dialect_help)
    join_parser.set_defaults(handler=_cmd_join)

    check_parser = subparsers.add_parser("check", help="Run conformance cases from a JSON file.")
    check_parser.add_argument(
        "case_file",
        nargs="?",
        default=None,
        help="Path to a case file (default: bundled reference cases).",
    )
    check_parser.set_defaults(handler=_cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m winsplit`` and the ``winsplit`` script.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        code = args.handler(args)
    except WinsplitError as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
