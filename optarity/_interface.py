#!/usr/bin/env python3
"""
Protocols and shared values for optarity.

An OptionParser_p decides how many argv slots a single option occurrence
claims, and converts the raw strings it claims using a ParamType_p.

"""
# ruff: noqa: F401
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from importlib.metadata import PackageNotFoundError, version
from importlib.resources import files

# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, cast, assert_type, assert_never
from typing import Generic, NewType, TypeVar
# Protocols:
from typing import Protocol, runtime_checkable
# Typing Decorators:
from typing import no_type_check, final, override, overload

if TYPE_CHECKING:
    import pathlib as pl
    from jgdv import Maybe
    from typing import Final
    from typing import ClassVar, Any, LiteralString
    from typing import Never, Self, Literal
    from collections.abc import Iterable, Iterator, Callable, Generator
    from collections.abc import Sequence, Mapping, MutableMapping, Hashable
    from importlib.resources.abc import Traversable

    from optarity.structs import ParseResult, TargetSpec

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ : Final[str] = version("optarity")
except PackageNotFoundError:
    __version__ = "0.0.0"

# -- data
data_path                     = files("optarity.__data")
constants_file : Traversable  = data_path.joinpath("constants.toml")

CONSTANT_PREFIX : Final[str]  = "optarity.constants"

T_co = TypeVar("T_co", covariant=True)

# Body:

@runtime_checkable
class ParamType_p(Protocol[T_co]):
    """ A conversion strategy from a raw argv string to a typed value.

    `compatible_type` is the declared type every converted value is an instance of.
    It is what destination bindings are checked against, instead of inspecting values.
    """

    @property
    def name(self) -> str: ...

    @property
    def compatible_type(self) -> type: ...

    def convert(self, raw:str) -> T_co: ...

@runtime_checkable
class OptionParser_p(Protocol):
    """ Decides how many argv tokens an option occurrence consumes, and what they become.

    Implementers must not mutate argv, and must hold no per-parse state,
    so a single instance can serve every invocation of a command.
    """

    @property
    def repeatable_for_help(self) -> bool:
        """ True if the help formatter should show the option as taking repeated values """
        ...

    def parse_long(self, name:str, argv:Sequence[str], index:int, explicit:Maybe[str]=None) -> ParseResult:
        """
        name     : the flag used to invoke the option
        argv     : the entire list of command line arguments
        index    : the position of the flag in argv
        explicit : a value already split off the flag token, eg: from '--opt=val'
        """
        ...

    def parse_short(self, name:str, argv:Sequence[str], index:int, opt_index:int) -> ParseResult:
        """
        opt_index : the position of the option letter in argv[index],
                    which may be a bundle of short options, eg: '-abc'

        A consumed count of 0 means more options remain in argv[index].
        """
        ...

    def check_target(self, target:TargetSpec) -> None:
        """ Raise a TargetTypeError if the target definitely can't hold this parser's values.

        The declared type of a target may be only partially known,
        so this only raises when the incompatibility is certain.
        """
        ...
