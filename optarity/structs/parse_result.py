#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass

# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from typing import Any

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T")

@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """ The outcome of parsing one occurrence of an option.

    consumed : the number of argv slots claimed, starting at the flag's own index.
    value    : a single converted value, or a list of them for options taking several.
    """

    consumed : int
    value    : T|list[T]

    def __post_init__(self):
        if self.consumed < 0:
            raise ValueError("A ParseResult can't consume a negative number of args", self.consumed)

    def __iter__(self):
        """ allows `consumed, value = result` """
        yield self.consumed
        yield self.value
