#!/usr/bin/env python3
"""
Errors a developer can cause when defining a command
"""
# Imports:
from __future__ import annotations

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"InvalidParserError",
"TargetTypeError",

)
# ##-- end Generated Exports

from ._base import ConfigurationError

class InvalidParserError(ConfigurationError, ValueError):
    """ An option parser was constructed with impossible settings """
    general_msg = "Invalid Option Parser:"

class TargetTypeError(ConfigurationError, TypeError):
    """ A destination binding can't hold the values an option parser produces """
    general_msg = "Incompatible Option Target:"
