#!/usr/bin/env python3
"""
The Registry of argument definitions a program accepts.

Built once, before parsing, then only read.
Every short character and long name is unique across the registry,
a conflicting registration fails and changes nothing.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import tomllib
import types
# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv import Proto
from tomlguard import TomlGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from tokargs.errors import DefinitionError, DuplicateLong, DuplicateShort
from tokargs._structs.arg_name import ArgName, LongName, ShortName
from tokargs._structs.definition import ArgDef
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final, ClassVar, Any, Self
    from collections.abc import Iterable, Iterator, Mapping
    from tokargs.settings import ParserSettings

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

@Proto(API.ArgRegistry_p)
class Registry:
    """ Holds argument definitions, with constant time lookup by name.

    defs      : the definitions, in registration order.
    short_map : short character -> index into defs
    long_map  : long name       -> index into defs
    """

    def __init__(self):
        self._defs      : list[ArgDef]   = []
        self._short_map : dict[str, int] = {}
        self._long_map  : dict[str, int] = {}

    @classmethod
    def build_from(cls, definitions:Iterable[ArgDef|str|dict], *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> Self:
        """ Register each definition in order.
        String definitions are read with the prefix of the settings.
        A conflict here is a programmer error, so it propagates
        """
        registry = cls()
        for definition in definitions:
            registry.register(ArgDef.build(definition, settings=settings))

        return registry

    @classmethod
    def from_toml(cls, text:str, *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> Self:
        """ Build a registry from an array of tables:

        [[args]]
        short = "v"
        long  = "verbose"
        """
        try:
            guard = TomlGuard(tomllib.loads(text))
        except tomllib.TOMLDecodeError as err:
            raise DefinitionError("Argument definitions are not valid toml") from err

        try:
            definitions = guard.on_fail([], list).args()
        except TypeError as err:
            raise DefinitionError("Argument definitions must be an array of tables") from err

        match definitions:
            case list() | tuple():
                return cls.build_from(definitions, settings=settings)
            case _:
                raise DefinitionError("Argument definitions must be an array of tables: %s", definitions)

    def register(self, definition:ArgDef) -> int:
        """ Add a definition, returning its index.
        Checks every name before changing anything.
        """
        short, long = definition.names()
        if short is not None and short in self._short_map:
            raise DuplicateShort(short)
        if long is not None and long in self._long_map:
            raise DuplicateLong(long)

        index = len(self._defs)
        if short is not None:
            self._short_map[short] = index
        if long is not None:
            self._long_map[long] = index

        self._defs.append(definition)
        logging.debug("Registered %s at %s", definition, index)
        return index

    def contains_short(self, char:str) -> bool:
        return char in self._short_map

    def contains_long(self, text:str) -> bool:
        return text in self._long_map

    def index_of(self, name:ArgName) -> Maybe[int]:
        match name:
            case ShortName(char=char):
                return self._short_map.get(char, None)
            case LongName(name=text):
                return self._long_map.get(text, None)
            case _:
                return None

    def lookup(self, name:ArgName) -> Maybe[ArgDef]:
        """ The definition a parsed name refers to, if any """
        match self.index_of(name):
            case None:
                return None
            case int() as index:
                return self._defs[index]

    @property
    def short_map(self) -> Mapping[str, int]:
        return types.MappingProxyType(self._short_map)

    @property
    def long_map(self) -> Mapping[str, int]:
        return types.MappingProxyType(self._long_map)

    def __contains__(self, other:ArgName|ArgDef) -> bool:
        match other:
            case ArgName():
                return self.index_of(other) is not None
            case ArgDef():
                return other in self._defs
            case _:
                return False

    def __getitem__(self, index:int) -> ArgDef:
        return self._defs[index]

    def __iter__(self) -> Iterator[ArgDef]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def __repr__(self) -> str:
        return f"<Registry: {', '.join(str(x) for x in self._defs)}>"
