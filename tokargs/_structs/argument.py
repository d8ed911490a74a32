#!/usr/bin/env python3
"""
The entries a parse produces, in input order.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
# ##-- end stdlib imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from .arg_name import ArgName
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final, ClassVar, Any, Self

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

class Argument:
    """ A single parsed entry: Positional, Flag, or Option.
    Flags and Options have a `name`, Positionals report None for it.
    """

    def render(self, prefix:str=API.DEFAULT_PREFIX, assignment:str=API.DEFAULT_ASSIGNMENT) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.render()

@final
@dataclass(frozen=True)
class Positional(Argument):
    value : str

    @property
    def name(self) -> Maybe[ArgName]:
        return None

    def render(self, prefix:str=API.DEFAULT_PREFIX, assignment:str=API.DEFAULT_ASSIGNMENT) -> str:
        return self.value

@final
@dataclass(frozen=True)
class Flag(Argument):
    name : ArgName

    def render(self, prefix:str=API.DEFAULT_PREFIX, assignment:str=API.DEFAULT_ASSIGNMENT) -> str:
        return self.name.render(prefix)

@final
@dataclass(frozen=True)
class Option(Argument):
    name  : ArgName
    value : str

    def render(self, prefix:str=API.DEFAULT_PREFIX, assignment:str=API.DEFAULT_ASSIGNMENT) -> str:
        return f"{self.name.render(prefix)}{assignment}{self.value}"
