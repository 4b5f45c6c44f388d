#!/usr/bin/env python3
"""
The base errors of optarity.

Errors are split by who has to fix them:
a UsageError is the end user's mistake on the command line,
a ConfigurationError is the developer's mistake when wiring a command.
"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class OptarityError(Exception):
    """
      The base class for all optarity errors.
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Optarity Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class UsageError(OptarityError):
    """ The command line was wrong. Reported to the end user. """
    general_msg = "Usage Error:"

class ConfigurationError(OptarityError):
    """ A command was defined wrongly. Reported to the developer. """
    general_msg = "Configuration Error:"
