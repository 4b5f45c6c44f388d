#!/usr/bin/env python3
"""
Errors a user can cause by what they type
"""
# Imports:
from __future__ import annotations

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"BadOptionUsage",

)
# ##-- end Generated Exports

from ._base import UsageError

class BadOptionUsage(UsageError):
    """ An option occurrence was given the wrong number of values. """
    general_msg = "Bad Option Usage:"
