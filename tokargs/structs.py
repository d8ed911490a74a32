#!/usr/bin/env python3
"""
Public Access point for tokargs Structures
"""
from __future__ import annotations

from tokargs._structs.arg_name import ArgName, LongName, ShortName
from tokargs._structs.argument import Argument, Flag, Option, Positional
from tokargs._structs.definition import ArgDef, LongDef, ShortAndLongDef, ShortDef
from tokargs._structs.typed_args import FlagArg, OptionArg, PositionalArg
