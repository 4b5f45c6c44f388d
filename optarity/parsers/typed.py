#!/usr/bin/env python3
"""
The fixed arity option parser.

An option with nargs=N claims N values for each occurrence.
The first may be attached to the flag token ('--opt=val', '-oval'),
the rest are taken from the following argv slots.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from optarity import config
from optarity.errors import BadOptionUsage, InvalidParserError, TargetTypeError
from optarity.structs import ParseResult

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from jgdv import Maybe
    from collections.abc import Sequence
    from optarity._interface import ParamType_p
    from optarity.structs import TargetSpec

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T")

class TypedOptionParser(Generic[T]):
    """ Parses options which take a fixed number of values,
    converting each with a ParamType_p.

    Implements optarity._interface.OptionParser_p
    """

    def __init__(self, type_:ParamType_p[T], nargs:int=1):
        if nargs < 1:
            raise InvalidParserError(config.message("bad_nargs"), nargs)

        self._type  = type_
        self._nargs = nargs

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self._type.name} * {self._nargs}>"

    @property
    def nargs(self) -> int:
        return self._nargs

    @property
    def type_(self) -> ParamType_p[T]:
        return self._type

    @property
    def repeatable_for_help(self) -> bool:
        return self._nargs > 1

    def parse_long(self, name:str, argv:Sequence[str], index:int, explicit:Maybe[str]=None) -> ParseResult[T]:
        has_explicit = explicit is not None
        # the flag itself counts, so an attached value saves a slot
        consumed     = self._nargs if has_explicit else self._nargs + 1
        end_index    = index + consumed - 1

        if end_index > len(argv) - 1:
            match self._nargs:
                case 1:
                    raise BadOptionUsage(config.message("requires_argument"), name)
                case x:
                    raise BadOptionUsage(config.message("requires_arguments"), name, x)

        logging.debug("Option %s at %s consuming %s", name, index, consumed)
        match self._nargs:
            case 1 if has_explicit:
                return ParseResult(consumed, self._type.convert(explicit))
            case 1:
                return ParseResult(consumed, self._type.convert(argv[index + 1]))
            case _:
                raw = list(argv[index + 1:end_index + 1])
                if has_explicit:
                    raw.insert(0, explicit)

                logging.debug("Option %s raw values: %s", name, raw)
                return ParseResult(consumed, [self._type.convert(x) for x in raw])

    def parse_short(self, name:str, argv:Sequence[str], index:int, opt_index:int) -> ParseResult[T]:
        token    = argv[index]
        explicit = None
        if opt_index != len(token) - 1:
            # eg: '-ofile' is the option 'o' with the value 'file'
            explicit = token[opt_index + 1:]

        return self.parse_long(name, argv, index, explicit)

    def check_target(self, target:TargetSpec) -> None:
        produced  = self._type.compatible_type
        type_name = getattr(produced, "__name__", str(produced))
        if self._nargs > 1:
            if not target.accepts_sequence_of(produced):
                raise TargetTypeError(config.message("target_not_list"), target.name, type_name)
        elif not target.accepts(produced):
            raise TargetTypeError(config.message("target_wrong_type"), target.name, type_name)
