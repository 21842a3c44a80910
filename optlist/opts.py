import logging
import dataclasses as dt

from typing import Optional, Sequence
from optlist import const

_logger = logging.getLogger(__name__)

# --- Scan -------------------------------------------------------------- #


class Scan:
    """
    A read-only cursor over one argument token or option specification.
    Reading past the end yields '\0' instead of raising.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        self._src = src
        self._off = off

    def curr(self) -> str:
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        """Moves one character forward and returns the new current one."""
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def peek(self, off: int = 1) -> str:
        if self._off + off >= len(self._src):
            return "\0"

        return self._src[self._off + off]

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def tell(self) -> int:
        return self._off

    def rest(self) -> str:
        """The unread tail, used as an attached option value."""
        return self._src[self._off :]



# --- Options ----------------------------------------------------------- #


class ParseAllocationFailure(MemoryError):
    """
    Raised when the option list could not be built. The partial list is
    discarded, callers never see a truncated result.
    """

    pass


@dt.dataclass(frozen=True)
class Option:
    """
    Represents one option found on the command line.

    Attributes:
        letter: The option character, as it appears in the option specification.
        value: The value of a value-taking option, or None if no value was found.
        index: The position in argv where `value` was found, or `const.NO_INDEX`.
    """

    letter: str
    value: Optional[str] = None
    index: int = const.NO_INDEX

    def hasValue(self) -> bool:
        return self.value is not None


def matchOpt(c: str, spec: str) -> int:
    """
    Looks up an option character in a getopt style specification.

    Returns the position of the matching letter in `spec`, or `len(spec)` when
    `c` is not a recognized option. A ':' is only ever a suffix and never
    matches.
    """
    s = Scan(spec)
    while not s.eof() and (s.curr() != c or s.curr() == ":"):
        s.next()
        while not s.eof() and s.curr() == ":":
            s.next()
    return s.tell()


def _takesValue(spec: str, pos: int) -> bool:
    return Scan(spec, pos).peek() == ":"


def scan(args: Sequence[str], spec: str) -> list[Option]:
    """
    Collects every option of `args` recognized by `spec`, in the order they
    appear on the command line.

    `spec` lists the single character options, an option followed by ':'
    takes a value. The value is either the rest of the token (`-dVALUE`) or
    the whole next token (`-d VALUE`). `args[0]` is the program name and is
    never scanned. Unknown letters, a bare '-' and positional arguments are
    skipped without error, and so is a missing value. Neither `args` nor
    `spec` is modified.

    Raises:
        ParseAllocationFailure: if memory ran out while building the list.
    """
    if not args:
        return []

    assert spec is not None, "An option specification is required"

    result: list[Option] = []
    try:
        i = 1
        while i < len(args):
            token = args[i]
            s = Scan(token, 1)

            while token.startswith("-") and not s.eof():
                pos = matchOpt(s.curr(), spec)
                if pos == len(spec):
                    _logger.debug(f"Skipping unknown option '{s.curr()}' in argv[{i}]")
                    s.next()
                    continue

                letter = spec[pos]
                if not _takesValue(spec, pos):
                    _logger.debug(f"Found option '{letter}' in argv[{i}]")
                    result.append(Option(letter))
                    s.next()
                    continue

                s.next()
                if not s.eof():
                    _logger.debug(f"Found option '{letter}' with attached value in argv[{i}]")
                    result.append(Option(letter, s.rest(), i))
                elif i + 1 < len(args):
                    i += 1
                    _logger.debug(f"Found option '{letter}' with value in argv[{i}]")
                    result.append(Option(letter, args[i], i))
                else:
                    _logger.debug(f"Found option '{letter}' without its value")
                    result.append(Option(letter))

                # the rest of the token belongs to the value
                break

            i += 1

    except MemoryError as e:
        raise ParseAllocationFailure("Failed to build the option list") from e

    return result


# --- Paths ------------------------------------------------------------- #


def trim(path: str) -> str:
    """Strips any directory or drive prefix from `path`."""
    start = 0
    for delim in const.PATH_DELIMITERS:
        pos = path.rfind(delim, start)
        if pos >= 0:
            start = pos + 1
    return path[start:]
