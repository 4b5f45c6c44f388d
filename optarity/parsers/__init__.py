#!/usr/bin/env python3
"""
Option parsers, implementing optarity._interface.OptionParser_p
"""
# Imports:
from __future__ import annotations

from .typed import TypedOptionParser
from .flag import FlagOptionParser
