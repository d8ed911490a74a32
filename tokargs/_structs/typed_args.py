#!/usr/bin/env python3
"""
Strongly typed views of parsed Arguments.

Each wrapper implements API.FromArgument_p,
so ParsedArguments.find_all(OptionArg) gives only the options, etc.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv import Proto
# ##-- end 3rd party imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from .arg_name import ArgName
from .argument import Argument, Flag, Option, Positional
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

@Proto(API.FromArgument_p)
@dataclass(frozen=True)
class PositionalArg:
    value : str

    @classmethod
    def from_argument(cls, arg:Argument) -> Maybe[PositionalArg]:
        match arg:
            case Positional(value=value):
                return cls(value)
            case _:
                return None

@Proto(API.FromArgument_p)
@dataclass(frozen=True)
class FlagArg:
    name : ArgName

    @classmethod
    def from_argument(cls, arg:Argument) -> Maybe[FlagArg]:
        match arg:
            case Flag(name=name):
                return cls(name)
            case _:
                return None

@Proto(API.FromArgument_p)
@dataclass(frozen=True)
class OptionArg:
    name  : ArgName
    value : str

    @classmethod
    def from_argument(cls, arg:Argument) -> Maybe[OptionArg]:
        match arg:
            case Option(name=name, value=value):
                return cls(name, value)
            case _:
                return None
