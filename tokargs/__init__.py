#!/usr/bin/env python3
"""
tokargs : A tokenizer for command line arguments.

Turns ["-v", "--out", "file.txt", "input"] into
[Flag(-v), Option(--out, file.txt), Positional(input)],
optionally validating names against a Registry of definitions.

"""
# Imports:
from __future__ import annotations

from ._interface import __version__
from .structs import (ArgDef, ArgName, Argument, Flag, FlagArg, LongDef,
                      LongName, Option, OptionArg, Positional, PositionalArg,
                      ShortAndLongDef, ShortDef, ShortName)
from .args import ParsedArguments
from .registry import Registry
from .settings import ParserSettings
from .parsers.tokenizer import TokenParser, parse, parse_with_registry
