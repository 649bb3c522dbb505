"""Configuration defaults and .env loading for the winsplit CLI.

WHY: The command-line tool is often run in the same shell environment over
and over (e.g. always inspecting cmd.exe lines). Letting the defaults come
from the environment or a .env file saves retyping flags, while keeping the
library itself free of configuration.

HOW: python-dotenv loads the .env file on import. Values are module-level
constants read from os.environ with fallbacks. Only cli.py imports this
module; the codecs and the public API never do.

RULES:
- WINSPLIT_DEFAULT_DIALECT: dialect used when --dialect is not given
  (default "vc2008"; any alias accepted)
- WINSPLIT_ENCODING: encoding for bytes read from stdin and for case files
  (default "utf-8")
- WINSPLIT_LOG_LEVEL: logging level name for the CLI (default "WARNING")
- An invalid default dialect is reported when it is used, not at import
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from winsplit.dialects import resolve_dialect
from winsplit.models import Dialect

# Load .env from the working directory
load_dotenv()

DEFAULT_DIALECT = os.getenv("WINSPLIT_DEFAULT_DIALECT", Dialect.VC2008.value)
DEFAULT_ENCODING = os.getenv("WINSPLIT_ENCODING", "utf-8")
LOG_LEVEL = os.getenv("WINSPLIT_LOG_LEVEL", "WARNING").upper()


def load_default_dialect() -> Dialect:
    """Resolve the configured default dialect.

    Reads WINSPLIT_DEFAULT_DIALECT at call time so that changes made after
    import (tests, long-running shells) are honoured.

    Raises:
        UnknownDialectError: If the configured name is not a known alias.
    """
    return resolve_dialect(os.getenv("WINSPLIT_DEFAULT_DIALECT", DEFAULT_DIALECT))
