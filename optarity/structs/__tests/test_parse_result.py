#!/usr/bin/env python3
"""

"""
# ruff: noqa: ANN201, ANN001, B011
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import dataclasses
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest

# ##-- end 3rd party imports

# ##-- 1st party imports
from optarity.structs import ParseResult

# ##-- end 1st party imports

logging = logmod.root

class TestParseResult:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_basic(self):
        result = ParseResult(2, "blah")
        assert(result.consumed == 2)
        assert(result.value == "blah")

    def test_zero_consumed(self):
        result = ParseResult(0, True)
        assert(result.consumed == 0)

    def test_negative_consumed(self):
        with pytest.raises(ValueError):
            ParseResult(-1, True)

    def test_frozen(self):
        result = ParseResult(1, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.consumed = 2

    def test_unpack(self):
        consumed, value = ParseResult(4, [1, 2, 3])
        assert(consumed == 4)
        assert(value == [1, 2, 3])

    def test_equality(self):
        assert(ParseResult(1, "a") == ParseResult(1, "a"))
        assert(ParseResult(1, "a") != ParseResult(2, "a"))
        assert(ParseResult(1, ["a"]) != ParseResult(1, "a"))
