"""PowerShell argument splitting and quoting.

WHY: PowerShell has two kinds of string literal with different escaping,
and neither matches cmd.exe or the C runtime. Building a PowerShell command
line safely means knowing both.

HOW: split() walks the input with a three-way mode: outside quotes, inside
an expandable "double-quoted" region, or inside a verbatim 'single-quoted'
region. quote() always emits a verbatim single-quoted string, the only
PowerShell literal in which nothing but the quote itself is special.

RULES:
- Spaces and tabs outside quotes separate arguments.
- Inside "...": a backtick makes the next character literal, "" is one
  literal ", and a lone " ends the region.
- Inside '...': everything is literal except '', which is one literal ',
  and a lone ' ends the region.
- Backslashes are always literal. A backtick outside quotes is literal.
- Quote characters delimiting a region are not part of the argument.
- See https://learn.microsoft.com/powershell/module/microsoft.powershell.core/about/about_quoting_rules
"""

from typing import List

from .chars import (
    BACKTICK,
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    is_escape_leader,
    is_quote,
    is_whitespace,
)

_UNQUOTED = 0
_EXPANDABLE = 1
_VERBATIM = 2


def split(raw: str) -> List[str]:
    """Split a command line using PowerShell quoting rules.

    Example:
        >>> split("Get-Process -Name \\"My Process\\"")
        ['Get-Process', '-Name', 'My Process']
    """
    args = []  # type: List[str]
    arg = []  # type: List[str]
    in_arg = False
    mode = _UNQUOTED

    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]
        has_next = i + 1 < n

        if mode == _VERBATIM:
            if is_quote(c, SINGLE_QUOTE):
                if has_next and is_quote(raw[i + 1], SINGLE_QUOTE):
                    arg.append(SINGLE_QUOTE)
                    i += 1
                else:
                    mode = _UNQUOTED
            else:
                arg.append(c)
        elif mode == _EXPANDABLE:
            if is_escape_leader(c, BACKTICK):
                if has_next:
                    arg.append(raw[i + 1])
                    i += 1
            elif is_quote(c, DOUBLE_QUOTE):
                if has_next and is_quote(raw[i + 1], DOUBLE_QUOTE):
                    arg.append(DOUBLE_QUOTE)
                    i += 1
                else:
                    mode = _UNQUOTED
            else:
                arg.append(c)
        elif is_quote(c, DOUBLE_QUOTE):
            mode = _EXPANDABLE
            in_arg = True
        elif is_quote(c, SINGLE_QUOTE):
            mode = _VERBATIM
            in_arg = True
        elif is_whitespace(c):
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
    """Escape a token as a PowerShell single-quoted string.

    Every single quote is doubled; double quotes, backticks and dollar signs
    need nothing inside a verbatim string.

    Example:
        >>> quote("hello 'world', \\"good day\\"")
        '\\'hello \\'\\'world\\'\\', "good day"\\''
    """
    return SINGLE_QUOTE + token.replace(SINGLE_QUOTE, SINGLE_QUOTE * 2) + SINGLE_QUOTE
