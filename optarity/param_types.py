#!/usr/bin/env python3
"""
Stock conversion strategies, from raw argv strings to typed values.

Each declares a `compatible_type`, which option parsers check destination
bindings against. Malformed input raises a ConversionError,
which option parsers propagate untouched.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 1st party imports
from optarity import config
from optarity.errors import ConversionError

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from typing import Final
    from typing import Any
    from collections.abc import Iterable, Callable

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T")

DEFAULT_TRUE  : Final[list[str]] = ["true", "1", "yes", "y", "on"]
DEFAULT_FALSE : Final[list[str]] = ["false", "0", "no", "n", "off"]

class ParamType(Generic[T]):
    """ Base for conversion strategies.
    Subclasses set _name and _compatible_type, and implement convert.
    """
    _name             : str   = "value"
    _compatible_type  : type  = object

    @property
    def name(self) -> str:
        return self._name

    @property
    def compatible_type(self) -> type:
        return self._compatible_type

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"

    def convert(self, raw:str) -> T:
        raise NotImplementedError()

    def _fail(self, raw:str) -> ConversionError:
        return ConversionError(config.constants.conversion.invalid_value, repr(raw), self.name)

class StringParamType(ParamType[str]):
    _name            = "text"
    _compatible_type = str

    def convert(self, raw:str) -> str:
        return raw

class IntParamType(ParamType[int]):
    _name            = "integer"
    _compatible_type = int

    def convert(self, raw:str) -> int:
        try:
            return int(raw)
        except ValueError as err:
            raise self._fail(raw) from err

class FloatParamType(ParamType[float]):
    _name            = "float"
    _compatible_type = float

    def convert(self, raw:str) -> float:
        try:
            return float(raw)
        except ValueError as err:
            raise self._fail(raw) from err

class BoolParamType(ParamType[bool]):
    """ Case insensitive. The accepted words are set in constants.toml """
    _name            = "boolean"
    _compatible_type = bool

    def convert(self, raw:str) -> bool:
        true_vals  = config.constants.on_fail(DEFAULT_TRUE).conversion.true_values()
        false_vals = config.constants.on_fail(DEFAULT_FALSE).conversion.false_values()
        match raw.strip().lower():
            case x if x in true_vals:
                return True
            case x if x in false_vals:
                return False
            case _:
                raise self._fail(raw)

class PathParamType(ParamType[pl.Path]):
    _name            = "path"
    _compatible_type = pl.Path

    def convert(self, raw:str) -> pl.Path:
        if not bool(raw):
            raise self._fail(raw)

        return pl.Path(raw).expanduser()

class ChoiceParamType(ParamType[str]):
    """ A string limited to a fixed set of choices """
    _name            = "choice"
    _compatible_type = str

    def __init__(self, choices:Iterable[str], *, case_sensitive:bool=True):
        self.choices        = tuple(choices)
        self.case_sensitive = case_sensitive
        if not bool(self.choices):
            raise ValueError("A ChoiceParamType needs at least one choice")

    def convert(self, raw:str) -> str:
        match self.case_sensitive:
            case True if raw in self.choices:
                return raw
            case False:
                lowered = raw.lower()
                for choice in self.choices:
                    if choice.lower() == lowered:
                        return choice

        raise ConversionError(config.constants.conversion.invalid_choice,
                              repr(raw), ", ".join(self.choices))

class FuncParamType(ParamType[T]):
    """ Wraps any callable as a conversion strategy.
    Errors from the callable are not wrapped.
    """

    def __init__(self, func:Callable[[str], T], compatible_type:type=object, *, name:None|str=None):
        self._func             = func
        self._compatible_type  = compatible_type
        self._name             = name or getattr(func, "__name__", "value")

    def convert(self, raw:str) -> T:
        return self._func(raw)
