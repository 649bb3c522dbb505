"""Windows command-line splitting and quoting for three dialects.

WHY: A command line on Windows is a single string, and how it turns into
arguments depends on who reads it: the C runtime of the target program,
cmd.exe, or PowerShell. Each has its own quoting rules, and getting them
slightly wrong silently changes the arguments a program receives. This
package reproduces each convention exactly.

HOW: Each dialect lives in its own codec module (vc2008, cmd_exe,
powershell) exposing pure functions. The functions here pick the codec for
the requested dialect from the registry in dialects.py and call it.

RULES:
- split() and quote() are total over strings: no input string raises.
- quote() and join() are not defined for VC2008.
- split(d, quote(d, t)) == [t] for every token t and every dialect d that
  has quote().
- No global state: every call is independent and thread-safe.
- Bytes are only accepted through split_bytes(), which is the one place a
  decoding error can occur.
"""

from typing import Iterable, List, Union

from .dialects import CODECS, DIALECT_ALIASES, DialectCodec, get_codec, resolve_dialect
from .errors import (
    CommandLineDecodeError,
    ConformanceFileError,
    UnknownDialectError,
    UnsupportedOperationError,
    WinsplitError,
)
from .models import Dialect, Token, TokenList

__version__ = "0.1.0"

__all__ = [
    "split",
    "quote",
    "join",
    "split_bytes",
    "Dialect",
    "DialectCodec",
    "Token",
    "TokenList",
    "CODECS",
    "DIALECT_ALIASES",
    "get_codec",
    "resolve_dialect",
    "WinsplitError",
    "UnknownDialectError",
    "UnsupportedOperationError",
    "CommandLineDecodeError",
    "ConformanceFileError",
]


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(
            "{} must be str, not {}".format(name, type(value).__name__)
        )


def split(dialect: Union[Dialect, str], raw: str) -> List[str]:
    """Split a raw command line into arguments.

    Args:
        dialect: Dialect tag or alias ("vc2008", "cmd", "powershell", ...).
        raw: The command line.

    Returns:
        Unescaped arguments in order; empty for empty or all-whitespace input.

    Raises:
        UnknownDialectError: If dialect is not a known name.
        TypeError: If raw is not a str (use split_bytes for bytes).
    """
    codec = get_codec(dialect)
    _require_str(raw, "raw")
    return codec.split(raw)


def quote(dialect: Union[Dialect, str], token: str) -> str:
    """Escape one argument so the dialect's split() reads it back unchanged.

    Raises:
        UnknownDialectError: If dialect is not a known name.
        UnsupportedOperationError: For VC2008, which has no quoting rule here.
        TypeError: If token is not a str.
    """
    codec = get_codec(dialect)
    if codec.quote is None:
        raise UnsupportedOperationError(codec.dialect.value, "quote")
    _require_str(token, "token")
    return codec.quote(token)


def join(dialect: Union[Dialect, str], tokens: Iterable[str]) -> str:
    """Quote each token and join them with single spaces.

    split(dialect, join(dialect, tokens)) returns the tokens unchanged.
    """
    codec = get_codec(dialect)
    if codec.quote is None:
        raise UnsupportedOperationError(codec.dialect.value, "join")
    quoted = []  # type: List[str]
    for token in tokens:
        _require_str(token, "token")
        quoted.append(codec.quote(token))
    return " ".join(quoted)


def split_bytes(
    dialect: Union[Dialect, str],
    raw: bytes,
    encoding: str = "utf-8",
) -> List[str]:
    """Decode a command line given as bytes, then split it.

    Decoding is strict: there is no replacement character fallback, so a
    result never contains text that was not in the input.

    Raises:
        CommandLineDecodeError: If raw is not valid in the given encoding.
        UnknownDialectError: If dialect is not a known name.
    """
    codec = get_codec(dialect)
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(
            "raw must be bytes-like, not {}".format(type(raw).__name__)
        )
    try:
        text = bytes(raw).decode(encoding)
    except UnicodeDecodeError as exc:
        raise CommandLineDecodeError(encoding, str(exc)) from exc
    except LookupError as exc:
        raise CommandLineDecodeError(encoding, "unknown encoding") from exc
    return codec.split(text)
