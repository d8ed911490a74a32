#!/usr/bin/env python3
"""
Errors raised while building a Registry of argument definitions.
A failed registration leaves the registry unchanged.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"RegistryError",
"ConflictError",
"DuplicateShort",
"DuplicateLong",
"DefinitionError",

)
# ##-- end Generated Exports

from ._base import TokArgsError

class RegistryError(TokArgsError):
    general_msg = "tokargs Registry Failure:"
    pass

class ConflictError(RegistryError):
    """ A definition reuses a name already held by the registry """
    pass

class DuplicateShort(ConflictError):

    def __init__(self, char:str):
        super().__init__("Short argument -%s already defined", char)

    @property
    def char(self) -> str:
        return self.args[1]

class DuplicateLong(ConflictError):

    def __init__(self, text:str):
        super().__init__("Long argument --%s already defined", text)

    @property
    def text(self) -> str:
        return self.args[1]

class DefinitionError(RegistryError):
    """ Data couldn't be built into an argument definition """
    pass
