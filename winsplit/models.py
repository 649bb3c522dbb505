"""Data model for the command-line codecs.

WHY: Callers pick one of three fixed escaping conventions per call. A closed
enum makes the choice explicit and keeps typos out of the dispatch table.

HOW: Dialect inherits from str so its values serialize cleanly into JSON
case files and CLI output. Token and TokenList are aliases only: a token is
just its text, and order in the list is the argument position.

RULES:
- Dialect is closed: VC2008, CMD_EXE, POWERSHELL. Adding a dialect means a
  new codec module plus one registry entry in dialects.py.
- Dialect values are the canonical names used in case files.
"""

import enum
from typing import List

Token = str
TokenList = List[Token]


class Dialect(str, enum.Enum):
    """Escaping convention selector.

    - vc2008: C-runtime argv parsing (CommandLineToArgvW, VC++ 2008 rules)
    - cmd_exe: cmd.exe command-interpreter quoting
    - powershell: PowerShell quoting rules
    """

    VC2008 = "vc2008"
    CMD_EXE = "cmd_exe"
    POWERSHELL = "powershell"
