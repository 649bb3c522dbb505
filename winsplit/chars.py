"""Character classification shared by all three dialect codecs.

WHY: VC2008, cmd.exe and PowerShell disagree about almost everything except
which characters separate arguments and which characters open a quoted
region. Keeping those predicates in one place stops the codecs from drifting
apart on the parts they do share.

HOW: Plain module-level constants and one-line predicates. Each codec passes
its own quote character or escape leader where the dialects differ.

RULES:
- Only space and tab delimit arguments. CR, LF and NUL are ordinary
  characters in every dialect.
- Predicates take a single character and never raise.
"""

SPACE = " "
TAB = "\t"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
BACKSLASH = "\\"
CARET = "^"
BACKTICK = "`"

WHITESPACE = frozenset((SPACE, TAB))


def is_whitespace(c: str) -> bool:
    """True if c separates arguments outside a quoted region."""
    return c in WHITESPACE


def is_quote(c: str, quote_char: str = DOUBLE_QUOTE) -> bool:
    """True if c is the given quote character (double quote by default)."""
    return c == quote_char


def is_escape_leader(c: str, leader: str = BACKSLASH) -> bool:
    """True if c is the dialect's escape leader.

    The leader is ``\\`` for VC2008 (and only in front of a double quote),
    ``^`` for cmd.exe and a backtick for PowerShell.
    """
    return c == leader
