#!/usr/bin/env python3
"""
optarity : option token parsing.

Given an argv and the index of a flag, an option parser decides how many
tokens the occurrence claims, converts them, and checks at definition time
that the binding receiving them can hold the result.

"""
# Imports:
from __future__ import annotations

from ._interface import __version__, OptionParser_p, ParamType_p
from .config import load_constants
from .structs import ParseResult, TargetSpec
from .parsers import TypedOptionParser, FlagOptionParser
from .param_types import (ParamType, StringParamType, IntParamType,
                          FloatParamType, BoolParamType, PathParamType,
                          ChoiceParamType, FuncParamType)
