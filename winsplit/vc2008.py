r"""VC++ 2008 C-runtime argument splitting.

WHY: Every program built against the Microsoft C runtime receives its argv
from the same parser (documented for CommandLineToArgvW and the VC++ 2008
CRT). Reproducing it exactly is the only way to know which arguments a
Windows program will really see for a given command line.

HOW: A single left-to-right scan with two pieces of state: a count of
backslashes not yet emitted, and a flag for being inside a double-quoted
part. Backslashes are only resolved once the next non-backslash character
is known.

RULES (the CRT rules, in order of precedence):
1. Arguments are separated by runs of spaces or tabs outside quotes.
2. 2n backslashes followed by " produce n backslashes, then the quote is
   handled as a normal quote (rules 4 and 5).
3. 2n+1 backslashes followed by " produce n backslashes and a literal ".
   The quote does not start or end a quoted part.
4. Outside a quoted part, " starts one. Inside, "" produces a literal " and
   the quoted part continues; a lone " ends it.
5. Backslashes not followed by " are copied unchanged.
6. An unterminated quoted part ends at end of input.
7. A quoted part makes an argument exist even when empty: `a "" b` has
   three arguments.

The first argument (the program path) is parsed with the same rules.

Examples (command line -> argv):
    "a b c"  d  e           -> [a b c] [d] [e]
    "ab\"c"  "\\"  d         -> [ab"c] [\] [d]
    a\\\b d"e f"g h         -> [a\\\b] [de fg] [h]
    a\\\"b c d              -> [a\"b] [c] [d]
    a\\\\"b c" d e          -> [a\\b c] [d] [e]
    "a b c""                -> [a b c"]
"""

from typing import List

from .chars import BACKSLASH, DOUBLE_QUOTE, is_escape_leader, is_quote, is_whitespace


def split(raw: str) -> List[str]:
    """Split a command line into arguments using the VC++ 2008 rules.

    Args:
        raw: The full command line, including the program path if present.

    Returns:
        The unescaped arguments in order. Empty for empty or all-whitespace
        input. Never raises for any string.
    """
    args = []  # type: List[str]
    arg = []  # type: List[str]
    in_arg = False
    in_quotes = False
    backslashes = 0

    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]

        if is_escape_leader(c, BACKSLASH):
            backslashes += 1
            in_arg = True
            i += 1
            continue

        if is_quote(c, DOUBLE_QUOTE):
            arg.append(BACKSLASH * (backslashes // 2))
            in_arg = True
            if backslashes % 2:
                arg.append(DOUBLE_QUOTE)
            elif in_quotes and i + 1 < n and is_quote(raw[i + 1], DOUBLE_QUOTE):
                arg.append(DOUBLE_QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
            backslashes = 0
            i += 1
            continue

        if backslashes:
            arg.append(BACKSLASH * backslashes)
            backslashes = 0

        if is_whitespace(c) and not in_quotes:
            if in_arg:
                args.append("".join(arg))
                arg = []
                in_arg = False
        else:
            arg.append(c)
            in_arg = True
        i += 1

    if backslashes:
        arg.append(BACKSLASH * backslashes)
    if in_arg:
        args.append("".join(arg))

    return args
