"""cmd.exe command-interpreter splitting and quoting.

WHY: Commands typed at a cmd.exe prompt or written into batch files follow
the interpreter's own quoting, which is not the C runtime's: backslashes
mean nothing to cmd.exe, the caret is its escape character, and a double
quote is a plain on/off switch.

HOW: split() is a character scan with a quote flag. quote() wraps the token
in double quotes and doubles any embedded quote, which split() reads back
as a single literal quote.

RULES:
- Double quotes are a simple state machine: the first " turns quoting on,
  the next turns it off. Inside a quoted region "" is one literal ".
- Outside quotes, ^ makes the next character literal and is itself removed.
  Inside quotes ^ is an ordinary character.
- Backslashes are always copied unchanged.
- Inside quotes cmd.exe treats & | < > ( ) ^ literally, so quote() only has
  to deal with the double quote. Doubling embedded quotes leaves cmd.exe's
  quote state on for the rest of the token.
- %VAR% (and !VAR! with delayed expansion) is expanded by cmd.exe even
  inside quotes and has no escape on an interactive command line. quote()
  leaves percent and exclamation signs untouched; split() never expands.
"""

from typing import List

from .chars import CARET, DOUBLE_QUOTE, is_escape_leader, is_quote, is_whitespace


def split(raw: str) -> List[str]:
    """Split a command line the way cmd.exe groups its arguments.

    Example:
        >>> split('"C:\\\\Program Files\\\\App" /C "dir /s"')
        ['C:\\\\Program Files\\\\App', '/C', 'dir /s']
    """
    args = []  # type: List[str]
    arg = []  # type: List[str]
    in_arg = False
    in_quotes = False

    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]

        if is_quote(c, DOUBLE_QUOTE):
            in_arg = True
            if in_quotes and i + 1 < n and is_quote(raw[i + 1], DOUBLE_QUOTE):
                arg.append(DOUBLE_QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif is_escape_leader(c, CARET) and not in_quotes:
            # A trailing caret continues the line; with nothing after it, drop it.
            in_arg = True
            if i + 1 < n:
                arg.append(raw[i + 1])
                i += 1
        elif is_whitespace(c) and not in_quotes:
            if in_arg:
                args.append("".join(arg))
                arg = []
                in_arg = False
        else:
            arg.append(c)
            in_arg = True
        i += 1

    if in_arg:
        args.append("".join(arg))

    return args


def quote(token: str) -> str:
    """Escape a token for a cmd.exe command line.

    The result is always double-quoted, with each embedded double quote
    written as two.

    Example:
        >>> quote('say "hi" & exit')
        '"say ""hi"" & exit"'
    """
    return DOUBLE_QUOTE + token.replace(DOUBLE_QUOTE, DOUBLE_QUOTE * 2) + DOUBLE_QUOTE
