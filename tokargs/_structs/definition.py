#!/usr/bin/env python3
"""
Definitions of the arguments a program accepts.
A Registry holds these, and a validating parse checks parsed names against them.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator
from tomlguard import TomlGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from tokargs.errors import DefinitionError
from tokargs.settings import ParserSettings
from .arg_name import ArgName, LongName, ShortName
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

class ArgDef(BaseModel, frozen=True):
    """ Describes an argument a Registry recognises.
    One of ShortDef, LongDef, or ShortAndLongDef.

    Build from strings or tables with ArgDef.build:
    "-v", "--verbose", "-v|--verbose", {short="v", long="verbose"}

    Strings are read, and names checked, using the prefix and assignment
    of the settings passed to build. eg: "+v|++verbose" with prefix="+".
    """

    @staticmethod
    def build(data:str|dict|TomlGuard|ArgDef, *, settings:Maybe[dict|TomlGuard|ParserSettings]=None) -> ArgDef:
        settings = ParserSettings.build(settings)
        context  = {"settings": settings}
        try:
            match data:
                case ArgDef():
                    return data
                case TomlGuard():
                    return ArgDef.build(dict(data._table()), settings=settings)
                case str():
                    return ArgDef._build_from_str(data, settings)
                case {"short": _, "long": _}:
                    return ShortAndLongDef.model_validate(data, context=context)
                case {"short": _}:
                    return ShortDef.model_validate(data, context=context)
                case {"long": _}:
                    return LongDef.model_validate(data, context=context)
                case _:
                    raise DefinitionError("Can't build an argument definition from: %s", data)
        except ValidationError as err:
            raise DefinitionError("Invalid argument definition: %s", data) from err

    @staticmethod
    def _build_from_str(data:str, settings:ParserSettings) -> ArgDef:
        short, long = None, None
        for part in data.split(API.DEF_ALT_SEP):
            match part.strip():
                case x if x.startswith(settings.long_prefix) and long is None:
                    long = x.removeprefix(settings.long_prefix)
                case x if x.startswith(settings.short_prefix) and short is None:
                    short = x.removeprefix(settings.short_prefix)
                case _:
                    raise DefinitionError("Unrecognised argument definition: %s", data)

        context = {"settings": settings}
        match short, long:
            case str(), str():
                return ShortAndLongDef.model_validate({"short": short, "long": long}, context=context)
            case str(), None:
                return ShortDef.model_validate({"short": short}, context=context)
            case None, str():
                return LongDef.model_validate({"long": long}, context=context)
            case _:
                raise DefinitionError("Unrecognised argument definition: %s", data)

    @staticmethod
    def _syntax(info:ValidationInfo) -> ParserSettings:
        """ The settings a definition is validated against, from the validation context """
        match info.context:
            case {"settings": ParserSettings() as settings}:
                return settings
            case _:
                return ParserSettings.default()

    @field_validator("short", check_fields=False)
    @classmethod
    def _validate_short(cls, val:str, info:ValidationInfo) -> str:
        syntax = ArgDef._syntax(info)
        if len(val) != 1 or val in (syntax.prefix, syntax.assignment):
            raise ValueError("Short names are a single character, not the prefix or assignment", val)
        return val

    @field_validator("long", check_fields=False)
    @classmethod
    def _validate_long(cls, val:str, info:ValidationInfo) -> str:
        syntax = ArgDef._syntax(info)
        if not bool(val) or val.startswith(syntax.prefix) or syntax.assignment in val:
            raise ValueError("Long names can't be empty, start with the prefix, or contain an assignment", val)
        return val

    def names(self) -> tuple[Maybe[str], Maybe[str]]:
        """ The (short, long) names of this definition. None where absent """
        match self:
            case ShortAndLongDef(short=short, long=long):
                return short, long
            case ShortDef(short=short):
                return short, None
            case LongDef(long=long):
                return None, long
            case _:
                raise TypeError("Unknown definition type", type(self))

    def matches(self, name:ArgName) -> bool:
        """ Does the parsed name refer to this definition """
        short, long = self.names()
        match name:
            case ShortName(char=x):
                return short is not None and x == short
            case LongName(name=x):
                return long is not None and x == long
            case _:
                return False

    def __str__(self) -> str:
        short, long = self.names()
        parts = []
        if short is not None:
            parts.append(str(ShortName(short)))
        if long is not None:
            parts.append(str(LongName(long)))
        return API.DEF_ALT_SEP.join(parts)

@final
class ShortDef(ArgDef, frozen=True):
    short : str

@final
class LongDef(ArgDef, frozen=True):
    long : str

@final
class ShortAndLongDef(ArgDef, frozen=True):
    """ A short and long name for one logical option. eg: -v|--verbose """
    short : str
    long  : str
