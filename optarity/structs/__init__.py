#!/usr/bin/env python3
"""
The data structures optarity passes around
"""
# Imports:
from __future__ import annotations

from .parse_result import ParseResult
from .target_spec import TargetSpec
