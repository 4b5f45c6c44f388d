#!/usr/bin/env python3
"""
The errors optarity can raise
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import OptarityError, UsageError, ConfigurationError
from .usage import BadOptionUsage
from .config import InvalidParserError, TargetTypeError
from .conversion import ConversionError

# ##-- end 1st party imports
