#!/usr/bin/env python3
"""
Errors raised by the stock conversion strategies.
Option parsers propagate these untouched.
"""
# Imports:
from __future__ import annotations

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ConversionError",

)
# ##-- end Generated Exports

from ._base import OptarityError

class ConversionError(OptarityError, ValueError):
    """ A raw argument string couldn't be converted to the requested type. """
    general_msg = "Conversion Failure:"
