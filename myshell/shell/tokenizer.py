"""
Split an input line into a command name and its arguments
"""

import shlex
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger('MyShell.shell.tokenizer')

# Tried in turn to repair an unterminated quote or a trailing backslash
_CLOSERS = ('"', "'", '\\')

@dataclass(frozen=True)
class Invocation:
    """One parsed input line"""
    name: str
    args: Tuple[str, ...] = ()

def tokenize(line: str) -> List[str]:
    """
    Split a line on whitespace, honouring quotes and backslash escapes

    Malformed quoting never fails: the line is repaired by closing the open
    quote, and if that does not help it is split on plain whitespace.
    """
    try:
        return shlex.split(line)
    except ValueError as e:
        logger.debug(f"Malformed quoting in {line!r}: {e}")

    for closer in _CLOSERS:
        try:
            return shlex.split(line + closer)
        except ValueError:
            continue
    return line.split()

def parse_invocation(line: str) -> Optional[Invocation]:
    """Parse a line into an Invocation, or None for a blank line"""
    tokens = tokenize(line)
    if not tokens:
        return None
    return Invocation(name=tokens[0], args=tuple(tokens[1:]))
