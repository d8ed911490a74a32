#!/usr/bin/env python3
"""
Control of the syntax the tokenizer recognises.

The defaults are in tokargs/__data/settings.toml,
and can be overridden with a toml document of the same shape:

[settings.parsing]
prefix         = "-"
assignment     = "="
separator      = "--"
numeric_values = false

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import tomllib
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from tomlguard import TomlGuard
# ##-- end 3rd party imports

# ##-- 1st party imports
from tokargs import _interface as API  # noqa: N812
from tokargs.errors import SettingsError
# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final, ClassVar, Any, Self

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

class ParserSettings(BaseModel, frozen=True, extra="forbid"):
    """ The syntax of a cli token list.

    prefix         : introduces short names, and doubled, long names.
    assignment     : separates a name from its value in a single token.
    separator      : switches the rest of the tokens to positionals.
    numeric_values : treat negative numbers as values rather than flags.

    Unknown keys are an error.
    """

    prefix         : str  = API.DEFAULT_PREFIX
    assignment     : str  = API.DEFAULT_ASSIGNMENT
    separator      : str  = API.DEFAULT_SEPARATOR
    numeric_values : bool = API.DEFAULT_NUMERIC

    @staticmethod
    def build(data:Maybe[dict|TomlGuard|ParserSettings]=None) -> ParserSettings:
        """ Build settings from a flat table, eg: {"prefix": "+"} """
        match data:
            case None:
                return ParserSettings.default()
            case ParserSettings():
                return data
            case TomlGuard():
                values = dict(data._table())
            case dict():
                values = data
            case _:
                raise SettingsError("Can't build parser settings from: %s", data)

        try:
            return ParserSettings.model_validate(values)
        except ValidationError as err:
            raise SettingsError("Invalid parser settings: %s", values) from err

    @staticmethod
    def load(text:str) -> ParserSettings:
        """ Build settings from a toml document, using defaults for missing values """
        try:
            guard = TomlGuard(tomllib.loads(text))
        except tomllib.TOMLDecodeError as err:
            raise SettingsError("Settings are not valid toml") from err

        return ParserSettings.build({
            "prefix"         : guard.on_fail(API.DEFAULT_PREFIX, str).settings.parsing.prefix(),
            "assignment"     : guard.on_fail(API.DEFAULT_ASSIGNMENT, str).settings.parsing.assignment(),
            "separator"      : guard.on_fail(API.DEFAULT_SEPARATOR, str).settings.parsing.separator(),
            "numeric_values" : guard.on_fail(API.DEFAULT_NUMERIC, bool).settings.parsing.numeric_values(),
        })

    @staticmethod
    @ftz.cache
    def default() -> ParserSettings:
        logging.debug("Loading default parser settings from: %s", API.settings_file)
        return ParserSettings.load(API.settings_file.read_text())

    @field_validator("prefix", "assignment")
    @classmethod
    def _validate_single_char(cls, val:str) -> str:
        if len(val) != 1 or val.isalnum() or val.isspace():
            raise ValueError("Must be a single punctuation character", val)
        return val

    @field_validator("separator")
    @classmethod
    def _validate_separator(cls, val:str) -> str:
        if not bool(val):
            raise ValueError("The separator can't be empty")
        return val

    @model_validator(mode="after")
    def _validate_distinct(self) -> Self:
        if self.prefix == self.assignment:
            raise ValueError("The prefix and assignment characters must differ", self.prefix)
        return self

    @property
    def short_prefix(self) -> str:
        return self.prefix

    @property
    def long_prefix(self) -> str:
        return self.prefix * 2

    def is_flag_like(self, token:str) -> bool:
        """ The lookahead test: would this token be read as a flag, not a value """
        if not token.startswith(self.prefix):
            return False
        return not self.is_numeric(token)

    def is_numeric(self, token:str) -> bool:
        return self.numeric_values and API.NUMERIC_RE.match(token) is not None
