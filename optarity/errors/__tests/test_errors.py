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

# ##-- end 1st party imports

logging = logmod.root

class TestErrors:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_formatting(self):
        err = errors.BadOptionUsage("%s option requires %s arguments", "--opt", 3)
        assert(str(err) == "--opt option requires 3 arguments")

    def test_formatting_plain(self):
        err = errors.OptarityError("a simple message")
        assert(str(err) == "a simple message")

    def test_formatting_mismatch(self):
        err = errors.OptarityError("%s and %s", "blah")
        assert(str(err) == str(("%s and %s", "blah")))

    def test_usage_and_config_are_disjoint(self):
        assert(not issubclass(errors.BadOptionUsage, errors.ConfigurationError))
        assert(not issubclass(errors.TargetTypeError, errors.UsageError))
        assert(not issubclass(errors.InvalidParserError, errors.UsageError))
        assert(not issubclass(errors.ConversionError, errors.UsageError))
        assert(not issubclass(errors.ConversionError, errors.ConfigurationError))

    @pytest.mark.parametrize(["cls", "builtin"], [(errors.TargetTypeError, TypeError),
                                                  (errors.InvalidParserError, ValueError),
                                                  (errors.ConversionError, ValueError)])
    def test_builtin_bases(self, cls, builtin):
        assert(issubclass(cls, builtin))
        assert(issubclass(cls, errors.OptarityError))
