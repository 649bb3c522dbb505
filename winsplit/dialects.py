"""Dialect registry: maps each Dialect tag to its pure codec functions.

WHY: The public API, the conformance runner and the CLI all need one lookup
from a dialect (or a name a user typed) to the right split/quote functions.
A central table makes the dispatch explicit and keeps the codec modules free
of any knowledge about each other.

HOW: CODECS maps Dialect to a frozen DialectCodec holding plain functions.
DIALECT_ALIASES maps lowercase names to Dialect so users can type the names
they already know ("cmd", "pwsh", "msvc").

RULES:
- A codec is data, not a subclass: split is required, quote may be None.
- VC2008 has no quote function.
- Alias lookup is case-insensitive and ignores surrounding whitespace.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from . import cmd_exe, powershell, vc2008
from .errors import UnknownDialectError
from .models import Dialect


@dataclass(frozen=True)
class DialectCodec:
    """The split and quote functions for one dialect.

    Attributes:
        dialect: The tag this codec belongs to.
        split: Raw command line -> list of unescaped arguments.
        quote: Token -> escaped string, or None if the dialect has no quoting.
    """

    dialect: Dialect
    split: Callable[[str], List[str]]
    quote: Optional[Callable[[str], str]] = None

    @property
    def supports_quote(self) -> bool:
        return self.quote is not None


CODECS: Dict[Dialect, DialectCodec] = {
    Dialect.VC2008: DialectCodec(Dialect.VC2008, vc2008.split),
    Dialect.CMD_EXE: DialectCodec(Dialect.CMD_EXE, cmd_exe.split, cmd_exe.quote),
    Dialect.POWERSHELL: DialectCodec(Dialect.POWERSHELL, powershell.split, powershell.quote),
}

DIALECT_ALIASES: Dict[str, Dialect] = {
    "vc2008": Dialect.VC2008,
    "vc": Dialect.VC2008,
    "msvc": Dialect.VC2008,
    "crt": Dialect.VC2008,
    "argv": Dialect.VC2008,
    "cmd_exe": Dialect.CMD_EXE,
    "cmd.exe": Dialect.CMD_EXE,
    "cmdexe": Dialect.CMD_EXE,
    "cmd": Dialect.CMD_EXE,
    "powershell": Dialect.POWERSHELL,
    "pwsh": Dialect.POWERSHELL,
    "ps": Dialect.POWERSHELL,
}


def resolve_dialect(value: Union[Dialect, str]) -> Dialect:
    """Turn a Dialect or a dialect name into a Dialect.

    Raises:
        UnknownDialectError: If the name matches no alias.
    """
    if isinstance(value, Dialect):
        return value
    key = str(value).strip().lower()
    try:
        return DIALECT_ALIASES[key]
    except KeyError:
        raise UnknownDialectError(str(value), DIALECT_ALIASES.keys()) from None


def get_codec(value: Union[Dialect, str]) -> DialectCodec:
    """Look up the codec for a Dialect or dialect name."""
    return CODECS[resolve_dialect(value)]
