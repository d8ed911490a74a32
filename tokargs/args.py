#!/usr/bin/env python3
"""
The result of parsing: an ordered, read-only, sequence of Arguments,
with queries by typed wrapper and by definition.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import collections.abc
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
from tokargs._structs.argument import Argument, Flag, Option
from tokargs._structs.definition import ArgDef
from tokargs._structs.typed_args import PositionalArg
from tokargs.settings import ParserSettings
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, TypeVar, overload

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final, ClassVar, Any, Self
    from collections.abc import Iterable, Iterator
    from tomlguard import TomlGuard
    from tokargs._interface import ArgRegistry_p, FromArgument_p

    Wrapper = TypeVar("Wrapper", bound=FromArgument_p)

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

class ParsedArguments(collections.abc.Sequence):
    """ Arguments, in the order they were given on the command line """

    def __init__(self, entries:Iterable[Argument]=(), *, settings:Maybe[dict|TomlGuard|ParserSettings]=None):
        self._entries  : tuple[Argument, ...] = tuple(entries)
        self._settings : ParserSettings        = ParserSettings.build(settings)

    @property
    def settings(self) -> ParserSettings:
        """ The syntax these arguments were parsed with """
        return self._settings

    @classmethod
    def parse(cls, tokens:Iterable[str], registry:Maybe[ArgRegistry_p]=None, *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> ParsedArguments:
        """ Parse tokens, validating against the registry if one is given """
        from tokargs.parsers.tokenizer import TokenParser
        return TokenParser(registry, settings=settings).parse(tokens)

    def find_all(self, kind:type[Wrapper]) -> list[Wrapper]:
        """ Every argument which converts to the kind, eg: find_all(OptionArg) """
        return [x for arg in self._entries if (x:=kind.from_argument(arg)) is not None]

    def find(self, kind:type[Wrapper], definition:ArgDef|str|dict) -> Maybe[Wrapper]:
        """ Find the first Flag or Option the definition matches,
        then convert it to the kind.
        None if there is no match, or the match isn't of that kind.
        """
        definition = ArgDef.build(definition, settings=self._settings)
        for arg in self._entries:
            match arg:
                case Flag(name=name) | Option(name=name) if definition.matches(name):
                    return kind.from_argument(arg)
                case _:
                    pass

        return None

    def has(self, definition:ArgDef|str|dict) -> bool:
        """ Was a flag or option matching the definition given """
        definition = ArgDef.build(definition, settings=self._settings)
        return any(definition.matches(arg.name) for arg in self._entries if arg.name is not None)

    def positionals(self) -> list[str]:
        return [x.value for x in self.find_all(PositionalArg)]

    def render(self) -> list[str]:
        """ The entries as tokens, in the syntax they were parsed with """
        return [x.render(self._settings.prefix, self._settings.assignment) for x in self._entries]

    @overload
    def __getitem__(self, index:int) -> Argument: ...

    @overload
    def __getitem__(self, index:slice) -> ParsedArguments: ...

    def __getitem__(self, index):
        match index:
            case slice():
                return ParsedArguments(self._entries[index], settings=self._settings)
            case _:
                return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._entries)

    def __eq__(self, other:object) -> bool:
        match other:
            case ParsedArguments():
                return self._entries == other._entries
            case list() | tuple():
                return self._entries == tuple(other)
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"<ParsedArguments: {' '.join(self.render())}>"
