#!/usr/bin/env python3
"""

"""
# ruff: noqa: ANN201, ANN001, B011
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest

# ##-- end 3rd party imports

# ##-- 1st party imports
from optarity import errors
from optarity._interface import OptionParser_p
from optarity.parsers import FlagOptionParser
from optarity.structs import ParseResult, TargetSpec

# ##-- end 1st party imports

logging = logmod.root

class TestFlagOptionParser:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_basic(self):
        parser = FlagOptionParser()
        assert(isinstance(parser, OptionParser_p))
        assert(not parser.repeatable_for_help)

    def test_long(self):
        parser = FlagOptionParser()
        match parser.parse_long("--verbose", ["--verbose", "next"], 0):
            case ParseResult(consumed=1, value=True):
                assert(True)
            case x:
                assert(False), x

    def test_long_with_value_fails(self):
        parser = FlagOptionParser()
        with pytest.raises(errors.BadOptionUsage) as ctx:
            parser.parse_long("--verbose", ["--verbose=yes"], 0, "yes")

        assert(str(ctx.value) == "--verbose option does not take a value")

    def test_short_alone(self):
        parser = FlagOptionParser()
        result = parser.parse_short("-v", ["-v"], 0, 1)
        assert(result.consumed == 1)
        assert(result.value is True)

    def test_short_bundled(self):
        parser = FlagOptionParser()
        argv   = ["-vvx"]
        assert(parser.parse_short("-v", argv, 0, 1).consumed == 0)
        assert(parser.parse_short("-v", argv, 0, 2).consumed == 0)
        assert(parser.parse_short("-x", argv, 0, 3).consumed == 1)

    def test_target_bool(self):
        parser = FlagOptionParser()
        parser.check_target(TargetSpec(name="verbose", type=bool))
        parser.check_target(TargetSpec.from_annotation("verbose", bool|None))
        parser.check_target(TargetSpec(name="verbose"))

    def test_target_wrong_type(self):
        parser = FlagOptionParser()
        with pytest.raises(errors.TargetTypeError) as ctx:
            parser.check_target(TargetSpec(name="verbose", type=str))

        assert(str(ctx.value) == "parameter verbose must be of type bool")

    def test_target_list(self):
        parser = FlagOptionParser()
        with pytest.raises(errors.TargetTypeError):
            parser.check_target(TargetSpec.from_annotation("verbose", list[bool]))
