#!/usr/bin/env python3
"""

"""
# ruff: noqa: ANN201, ARG001, ANN001, ARG002, ANN202, B011

# Imports
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
# ##-- end 3rd party imports

##--|
from tokargs import _interface as API  # noqa: N812
from tokargs._structs.arg_name import LongName, ShortName
from tokargs._structs.argument import Flag, Option, Positional
from tokargs._structs.typed_args import FlagArg, OptionArg, PositionalArg
##--|

# ##-- types
# isort: off
import typing

if typing.TYPE_CHECKING:
    from typing import Final, ClassVar, Any, Self
    from jgdv import Maybe

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
POS  : Final = Positional("file.txt")
FLAG : Final = Flag(ShortName("v"))
OPT  : Final = Option(LongName("out"), "build")

# Body:

class TestArguments:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_names(self):
        assert(POS.name is None)
        assert(FLAG.name == ShortName("v"))
        assert(OPT.name == LongName("out"))

    def test_str(self):
        assert(str(POS) == "file.txt")
        assert(str(FLAG) == "-v")
        assert(str(OPT) == "--out=build")

class TestTypedArgs:

    @pytest.mark.parametrize("kind", [PositionalArg, FlagArg, OptionArg])
    def test_protocol(self, kind):
        assert(isinstance(kind, API.FromArgument_p))

    def test_positional(self):
        assert(PositionalArg.from_argument(POS) == PositionalArg("file.txt"))
        assert(PositionalArg.from_argument(FLAG) is None)
        assert(PositionalArg.from_argument(OPT) is None)

    def test_flag(self):
        assert(FlagArg.from_argument(FLAG) == FlagArg(ShortName("v")))
        assert(FlagArg.from_argument(POS) is None)
        assert(FlagArg.from_argument(OPT) is None)

    def test_option(self):
        match OptionArg.from_argument(OPT):
            case OptionArg(name=LongName(name="out"), value="build"):
                assert(True)
            case x:
                assert(False), x

        assert(OptionArg.from_argument(POS) is None)
        assert(OptionArg.from_argument(FLAG) is None)
