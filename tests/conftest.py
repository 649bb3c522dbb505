"""Shared test fixtures for the winsplit test suite.

WHY: Round-trip and re-quote tests for both quoting dialects should run over
the same set of awkward tokens, and the conformance and CLI tests both need
to write throwaway case files.

HOW: TRICKY_TOKENS lists tokens that exercise every special character of
every dialect. The write_case_file fixture dumps a dict as JSON under
tmp_path and returns the path.

RULES:
- TRICKY_TOKENS must include the empty token, lone quotes of both kinds,
  every escape leader, and trailing backslashes.
- Case files are always written as UTF-8.
"""

import json

import pytest

TRICKY_TOKENS = [
    "",
    "plain",
    "two words",
    " leading",
    "trailing ",
    "tab\there",
    '"',
    '""',
    "'",
    "''",
    'say "hi"',
    "it's",
    "C:\\Program Files\\",
    "\\",
    '\\"',
    '\\\\"quoted\\\\"',
    "a^b",
    "^",
    "^^",
    "&|<>()",
    "%PATH%",
    "!VAR!",
    "`",
    '`"',
    "$env:USERPROFILE",
    "line\nbreak",
    "\u00fcn\u00efc\u00f8d\u00e9 \u2713",
    "\"'`^\\ mixed",
    "ends with quote\"",
    "ends with single'",
]


@pytest.fixture
def tricky_tokens():
    """Tokens covering the special characters of every dialect."""
    return list(TRICKY_TOKENS)


@pytest.fixture
def write_case_file(tmp_path):
    """Write a case-file dict to tmp_path and return its path."""

    def _write(data, name="cases.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
