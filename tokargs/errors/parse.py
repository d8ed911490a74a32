#!/usr/bin/env python3
"""
Errors raised while turning cli tokens into Arguments.
All of these abort the entire parse.
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
"ParseError",
"MalformedArgument",
"UnknownArgument",
"UnknownLong",
"UnknownShort",

)
# ##-- end Generated Exports

from ._base import TokArgsError

class ParseError(TokArgsError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "tokargs CLI Parsing Failure:"
    pass

class MalformedArgument(ParseError):
    """ A token which looks like a flag, but can't be classified. eg: '-', '--=val' """

    def __init__(self, token:str, position:int):
        super().__init__("Malformed argument at position %s: %r", position, token)

    @property
    def token(self) -> str:
        return self.args[2]

    @property
    def position(self) -> int:
        return self.args[1]

class UnknownArgument(ParseError):
    """ A validating parse found a name the registry doesn't recognise """
    pass

class UnknownLong(UnknownArgument):

    def __init__(self, name:str, position:int):
        super().__init__("Unknown long argument at position %s: --%s", position, name)

    @property
    def name(self) -> str:
        return self.args[2]

    @property
    def position(self) -> int:
        return self.args[1]

class UnknownShort(UnknownArgument):

    def __init__(self, char:str, position:int):
        super().__init__("Unknown short argument at position %s: -%s", position, char)

    @property
    def char(self) -> str:
        return self.args[2]

    @property
    def position(self) -> int:
        return self.args[1]
