#!/usr/bin/env python3
"""
Names of parsed arguments.
A name is either a single character (-a), or a word (--all)

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
# ##-- end stdlib imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from typing import Final, ClassVar, Any, Self

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

class ArgName:
    """ Base of the two kinds of argument name. compares by value.
    str() renders with the default prefix, render() with a given one.
    """

    @property
    def text(self) -> str:
        raise NotImplementedError()

    def render(self, prefix:str=API.DEFAULT_PREFIX) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.render()

@final
@dataclass(frozen=True)
class ShortName(ArgName):
    """ -a """
    char : str

    @property
    def text(self) -> str:
        return self.char

    def render(self, prefix:str=API.DEFAULT_PREFIX) -> str:
        return f"{prefix}{self.char}"

@final
@dataclass(frozen=True)
class LongName(ArgName):
    """ --all """
    name : str

    @property
    def text(self) -> str:
        return self.name

    def render(self, prefix:str=API.DEFAULT_PREFIX) -> str:
        return f"{prefix * 2}{self.name}"
