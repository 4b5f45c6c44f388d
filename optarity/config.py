#!/usr/bin/env python3
"""
Loading of optarity's constants.

The packaged constants.toml is loaded on import into `constants`.
An application can override any of them (eg: to change message wording)
with load_constants, which merges a file's [optarity.constants] tables over the defaults.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from collections.abc import Mapping

# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv.structs.chainguard import ChainGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from optarity import _interface as API
from optarity.errors import ConfigurationError

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any
    from importlib.resources.abc import Traversable

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

def _read_constants(source:pl.Path|Traversable) -> ChainGuard:
    data = ChainGuard.read(source.read_text())
    return data.remove_prefix(API.CONSTANT_PREFIX)

def _merge(base:Mapping, override:Mapping) -> dict:
    """ Recursively merge two tables, override winning on leaf conflicts """
    result = dict(base)
    for key, val in override.items():
        match result.get(key, None), val:
            case Mapping() as existing, Mapping():
                result[key] = _merge(existing, val)
            case _:
                result[key] = val
    else:
        return result

def load_constants(target:None|str|pl.Path=None) -> ChainGuard:
    """ (Re)load the global constants.

    With no target, resets to the packaged defaults.
    Otherwise the target's [optarity.constants] tables are merged over the defaults.
    """
    global constants
    match target:
        case None:
            constants = defaults
        case str():
            return load_constants(pl.Path(target))
        case pl.Path() as source if source.exists():
            logging.debug("Loading Constants: %s", source)
            override  = _read_constants(source)
            constants = ChainGuard(_merge(defaults._table(), override._table()))
        case pl.Path() as source:
            raise ConfigurationError("Constants file not found: %s", source)
        case x:
            raise TypeError(type(x))

    return constants

def message(key:str) -> str:
    """ Get a message template from the [messages] table,
    falling back to the packaged template if the loaded constants lack it
    """
    default = defaults.messages[key]
    return getattr(constants.on_fail(default).messages, key)()

defaults  : ChainGuard = _read_constants(API.constants_file)
constants : ChainGuard = defaults
