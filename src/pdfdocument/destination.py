"""
Destination - Output destination codes.

A destination is ``D`` (download), ``F`` (file), ``I`` (inline) or
``S`` (string). ``F`` may be combined with one other code, e.g. ``FD``
writes the file and then sends it as a download.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidDestinationError


class Destination(str, Enum):
    DOWNLOAD = "D"
    FILE = "F"
    INLINE = "I"
    STRING = "S"


@dataclass(frozen=True)
class ParsedDestination:
    """A destination split into the file write and the dispatch."""

    write_file: bool
    dispatch: Optional[Destination] = None

    @property
    def needs_name(self) -> bool:
        return self.write_file or self.dispatch in (
            Destination.DOWNLOAD,
            Destination.INLINE,
        )


def parse_destination(code: str) -> ParsedDestination:
    """
    Parse a destination code.

    Args:
        code: One of D, F, I, S, or F combined with one of D, I, S

    Returns:
        ParsedDestination; an empty code yields no file write and no dispatch

    Raises:
        InvalidDestinationError: If the code is not in the vocabulary
    """
    if isinstance(code, Destination):
        code = code.value

    write_file = Destination.FILE.value in code
    rest = code.replace(Destination.FILE.value, "", 1) if write_file else code

    if Destination.FILE.value in rest or len(rest) > 1:
        raise InvalidDestinationError(code)

    if not rest:
        return ParsedDestination(write_file=write_file)

    try:
        dispatch = Destination(rest)
    except ValueError:
        raise InvalidDestinationError(code) from None

    return ParsedDestination(write_file=write_file, dispatch=dispatch)
