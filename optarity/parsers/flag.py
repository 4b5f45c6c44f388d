#!/usr/bin/env python3
"""
The zero arity option parser, for on/off switches.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from optarity import config
from optarity.errors import BadOptionUsage, TargetTypeError
from optarity.structs import ParseResult

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from collections.abc import Sequence
    from optarity.structs import TargetSpec

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class FlagOptionParser:
    """ Parses options that take no values. Every occurrence is True.

    Implements optarity._interface.OptionParser_p
    """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

    @property
    def repeatable_for_help(self) -> bool:
        return False

    def parse_long(self, name:str, argv:Sequence[str], index:int, explicit:Maybe[str]=None) -> ParseResult[bool]:
        if explicit is not None:
            raise BadOptionUsage(config.message("takes_no_value"), name)

        return ParseResult(1, True)

    def parse_short(self, name:str, argv:Sequence[str], index:int, opt_index:int) -> ParseResult[bool]:
        # Only finish with the token once its last bundled option is reached
        match opt_index == len(argv[index]) - 1:
            case True:
                return ParseResult(1, True)
            case False:
                logging.debug("Flag %s is bundled, more options remain in: %s", name, argv[index])
                return ParseResult(0, True)

    def check_target(self, target:TargetSpec) -> None:
        if not target.accepts(bool):
            raise TargetTypeError(config.message("target_wrong_type"), target.name, bool.__name__)
