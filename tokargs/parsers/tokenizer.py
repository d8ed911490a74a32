#!/usr/bin/env python3
"""
The Tokenizer: a single left to right pass over cli tokens,
classifying each as a Positional, Flag, or Option,
with at most one token of lookahead for an option's value.

# {prog} --long=val --long val --flag -abc=val -abc val -abc pos -- pos...

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from jgdv import Proto
# ##-- end 3rd party imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from tokargs.errors import MalformedArgument, UnknownLong, UnknownShort
from tokargs._structs.arg_name import LongName, ShortName
from tokargs._structs.argument import Argument, Flag, Option, Positional
from tokargs.args import ParsedArguments
from tokargs.settings import ParserSettings
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final, ClassVar, Any, Self
    from collections.abc import Iterable, Iterator
    from tomlguard import TomlGuard

    type Cursor = mitz.peekable[tuple[int, str]]

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

@Proto(API.ArgParser_p)
class TokenParser:
    """
    Converts a list of tokens into ParsedArguments.

    Without a registry, tokens are classified purely by syntax.
    With one, every parsed name must be registered.

    The first error aborts the parse, there are no partial results.
    """

    class _ParseState(enum.Enum):
        FLAGS      = enum.auto()
        POSITIONAL = enum.auto()

    def __init__(self, registry:Maybe[API.ArgRegistry_p]=None, *, settings:Maybe[dict|TomlGuard|ParserSettings]=None):
        self.PS       = TokenParser._ParseState
        self.registry = registry
        self.settings = ParserSettings.build(settings)

    def parse(self, tokens:Iterable[str]) -> ParsedArguments:
        if isinstance(tokens, str):
            raise TypeError("Tokens should be a sequence of strings, not a string", tokens)

        tokens                    = list(tokens)
        result : list[Argument]   = []
        focus                     = self.PS.FLAGS
        cursor                    = mitz.peekable(enumerate(tokens))
        logging.debug("Parsing tokens: %s", tokens)

        for idx, token in cursor:
            match focus:
                case self.PS.POSITIONAL:
                    result.append(Positional(token))
                case self.PS.FLAGS if token == self.settings.separator:
                    # a one way switch
                    logging.debug("Separator at %s, remaining tokens are positional", idx)
                    focus = self.PS.POSITIONAL
                case self.PS.FLAGS if self.settings.is_numeric(token):
                    result.append(Positional(token))
                case self.PS.FLAGS if token.startswith(self.settings.long_prefix):
                    result.append(self._parse_long(idx, token, cursor))
                case self.PS.FLAGS if token.startswith(self.settings.short_prefix):
                    result += self._parse_short(idx, token, cursor)
                case _:
                    result.append(Positional(token))

        return ParsedArguments(result, settings=self.settings)

    def _parse_long(self, idx:int, token:str, cursor:Cursor) -> Argument:
        """ --name=val, --name val, or --name """
        body = token.removeprefix(self.settings.long_prefix)
        match body.partition(self.settings.assignment):
            case (name, "", ""):
                self._check_long(idx, token, name)
                value = self._maybe_value(cursor)
            case (name, _, value):
                self._check_long(idx, token, name)

        match value:
            case None:
                return Flag(LongName(name))
            case str():
                return Option(LongName(name), value)

    def _parse_short(self, idx:int, token:str, cursor:Cursor) -> list[Argument]:
        """ -abc=val, -abc val, or -abc.
        Each char becomes its own entry, all sharing the one value.
        """
        body = token.removeprefix(self.settings.short_prefix)
        match body.partition(self.settings.assignment):
            case ("", _, _):
                raise MalformedArgument(token, idx)
            case (chars, "", ""):
                names = self._check_shorts(idx, chars)
                value = self._maybe_value(cursor)
            case (chars, _, value):
                names = self._check_shorts(idx, chars)

        match value:
            case None:
                return [Flag(x) for x in names]
            case str():
                return [Option(x, value) for x in names]

    def _maybe_value(self, cursor:Cursor) -> Maybe[str]:
        """ Consume the next token as a value, unless it looks like a flag """
        match cursor.peek(None):
            case None:
                return None
            case (_, str() as upcoming) if upcoming == self.settings.separator:
                return None
            case (_, str() as upcoming) if self.settings.is_flag_like(upcoming):
                return None
            case (int() as pos, str()):
                _, value = next(cursor)
                logging.debug("Consumed token %s as a value", pos)
                return value

    def _check_long(self, idx:int, token:str, name:str) -> None:
        if not bool(name) or name.startswith(self.settings.prefix):
            raise MalformedArgument(token, idx)
        if self.registry is not None and not self.registry.contains_long(name):
            raise UnknownLong(name, idx)

    def _check_shorts(self, idx:int, chars:str) -> list[ShortName]:
        if self.registry is None:
            return [ShortName(x) for x in chars]

        for char in chars:
            if not self.registry.contains_short(char):
                raise UnknownShort(char, idx)

        return [ShortName(x) for x in chars]

##--|

def parse(tokens:Iterable[str], *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> ParsedArguments:
    """ Classify tokens by syntax alone """
    return TokenParser(settings=settings).parse(tokens)

def parse_with_registry(tokens:Iterable[str], registry:API.ArgRegistry_p, *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> ParsedArguments:
    """ Classify tokens, failing on any name the registry doesn't hold """
    return TokenParser(registry, settings=settings).parse(tokens)
