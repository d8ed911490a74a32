#!/usr/bin/env python3
"""
Shared constants and protocols for tokargs.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
from importlib.metadata import version
from importlib.resources import files
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, cast, assert_type, assert_never
from typing import Generic, NewType
# Protocols:
from typing import Protocol, runtime_checkable
# Typing Decorators:
from typing import no_type_check, final, override, overload

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final
    from typing import ClassVar, Any, LiteralString
    from typing import Never, Self, Literal
    from typing import TypeGuard
    from collections.abc import Iterable, Iterator, Callable, Generator
    from collections.abc import Sequence, Mapping, MutableMapping, Hashable
    from importlib.resources.abc import Traversable

    from .args import ParsedArguments
    from ._structs.argument import Argument
    from ._structs.definition import ArgDef

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("tokargs")

# -- data
data_path                   = files("tokargs.__data")
settings_file : Traversable = data_path.joinpath("settings.toml")

# -- syntax defaults, used when settings.toml lacks a value
DEFAULT_PREFIX      : Final[str]        = "-"
DEFAULT_ASSIGNMENT  : Final[str]        = "="
DEFAULT_SEPARATOR   : Final[str]        = "--"
DEFAULT_NUMERIC     : Final[bool]       = False

# -- definition building
DEF_ALT_SEP         : Final[str]        = "|"

# -- matches -5, -2.5, -.5, -1e3, -0x1F
NUMERIC_RE          : Final[re.Pattern] = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$|^-0[xX][0-9a-fA-F]+$")

# Body:

@runtime_checkable
class ArgRegistry_p(Protocol):
    """ The set of argument shapes a program accepts """

    def register(self, definition:ArgDef) -> int: ...

    def contains_short(self, char:str) -> bool: ...

    def contains_long(self, text:str) -> bool: ...

    def lookup(self, name:Any) -> Maybe[ArgDef]: ...

@runtime_checkable
class ArgParser_p(Protocol):
    """ Turns a flat list of cli tokens into ParsedArguments """

    def parse(self, tokens:Iterable[str]) -> ParsedArguments: ...

@runtime_checkable
class FromArgument_p(Protocol):
    """ Conversion from a generic parsed Argument into a specific wrapper type.
    returns None when the argument is not of the right shape.
    """

    @classmethod
    def from_argument(cls, arg:Argument) -> Maybe[Self]: ...
