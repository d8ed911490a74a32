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
from pydantic import ValidationError
from tomlguard import TomlGuard
# ##-- end 3rd party imports

##--|
from tokargs.errors import DefinitionError
from tokargs._structs.arg_name import LongName, ShortName
from tokargs._structs.definition import ArgDef, LongDef, ShortAndLongDef, ShortDef
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

# Body:

class TestArgNames:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_value_identity(self):
        assert(ShortName("a") == ShortName("a"))
        assert(LongName("all") == LongName("all"))
        assert(ShortName("a") != LongName("a"))
        assert(len({ShortName("a"), ShortName("a"), LongName("a")}) == 2)

    def test_str(self):
        assert(str(ShortName("a")) == "-a")
        assert(str(LongName("all")) == "--all")

    def test_text(self):
        assert(ShortName("a").text == "a")
        assert(LongName("all").text == "all")

    def test_render_prefix(self):
        assert(ShortName("a").render("+") == "+a")
        assert(LongName("all").render("+") == "++all")
        assert(ShortName("a").render() == str(ShortName("a")))

class TestArgDef:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_ctors(self):
        assert(isinstance(ShortDef(short="a"), ArgDef))
        assert(isinstance(LongDef(long="all"), ArgDef))
        assert(isinstance(ShortAndLongDef(short="a", long="all"), ArgDef))

    def test_frozen(self):
        obj = ShortDef(short="a")
        with pytest.raises(ValidationError):
            obj.short = "b"

    def test_hashable(self):
        assert(len({ShortDef(short="a"), ShortDef(short="a"), LongDef(long="a")}) == 2)

    @pytest.mark.parametrize("short", ["", "ab", "-", "="])
    def test_bad_short(self, short):
        with pytest.raises(ValidationError):
            ShortDef(short=short)

    @pytest.mark.parametrize("long", ["", "-all", "a=b"])
    def test_bad_long(self, long):
        with pytest.raises(ValidationError):
            LongDef(long=long)

    def test_bad_pair(self):
        with pytest.raises(ValidationError):
            ShortAndLongDef(short="ab", long="all")

    def test_names(self):
        assert(ShortDef(short="a").names() == ("a", None))
        assert(LongDef(long="all").names() == (None, "all"))
        assert(ShortAndLongDef(short="a", long="all").names() == ("a", "all"))

    def test_str(self):
        assert(str(ShortDef(short="a")) == "-a")
        assert(str(LongDef(long="all")) == "--all")
        assert(str(ShortAndLongDef(short="a", long="all")) == "-a|--all")

class TestArgDefMatching:

    def test_short(self):
        obj = ShortDef(short="a")
        assert(obj.matches(ShortName("a")))
        assert(not obj.matches(ShortName("b")))
        assert(not obj.matches(LongName("a")))

    def test_long(self):
        obj = LongDef(long="all")
        assert(obj.matches(LongName("all")))
        assert(not obj.matches(LongName("al")))
        assert(not obj.matches(ShortName("a")))

    def test_short_and_long(self):
        obj = ShortAndLongDef(short="a", long="all")
        assert(obj.matches(ShortName("a")))
        assert(obj.matches(LongName("all")))
        assert(not obj.matches(LongName("a")))
        assert(not obj.matches(ShortName("l")))

    def test_non_name(self):
        assert(not ShortDef(short="a").matches("a"))

class TestArgDefBuild:

    @pytest.mark.parametrize("data,expected", [
        ("-a", ShortDef(short="a")),
        ("--all", LongDef(long="all")),
        ("-a|--all", ShortAndLongDef(short="a", long="all")),
        ("--all|-a", ShortAndLongDef(short="a", long="all")),
        (" -a | --all ", ShortAndLongDef(short="a", long="all")),
        ({"short": "a"}, ShortDef(short="a")),
        ({"long": "all"}, LongDef(long="all")),
        ({"short": "a", "long": "all"}, ShortAndLongDef(short="a", long="all")),
    ])
    def test_build(self, data, expected):
        assert(ArgDef.build(data) == expected)

    def test_build_passthrough(self):
        obj = LongDef(long="all")
        assert(ArgDef.build(obj) is obj)

    def test_build_tomlguard(self):
        data = TomlGuard({"short": "v", "long": "verbose"})
        assert(ArgDef.build(data) == ShortAndLongDef(short="v", long="verbose"))

    @pytest.mark.parametrize("data", ["a", "-ab", "--", "-", "-a|-b", "--a|--b", "--a=b", {}, {"desc": "blah"}, 5])
    def test_build_fail(self, data):
        with pytest.raises(DefinitionError):
            ArgDef.build(data)

    def test_build_fail_keeps_cause(self):
        with pytest.raises(DefinitionError) as ctx:
            ArgDef.build({"short": "ab"})

        assert(isinstance(ctx.value.__cause__, ValidationError))

class TestArgDefBuildSyntax:

    @pytest.mark.parametrize("data,expected", [
        ("+v", ShortDef(short="v")),
        ("++verbose", LongDef(long="verbose")),
        ("+v|++verbose", ShortAndLongDef(short="v", long="verbose")),
        ({"long": "a-b"}, LongDef(long="a-b")),
    ])
    def test_custom_prefix(self, data, expected):
        assert(ArgDef.build(data, settings={"prefix": "+"}) == expected)

    @pytest.mark.parametrize("data", ["-v", "--verbose", "+", "++", {"short": "+"}, {"long": "+all"}])
    def test_custom_prefix_fail(self, data):
        with pytest.raises(DefinitionError):
            ArgDef.build(data, settings={"prefix": "+"})

    def test_custom_assignment(self):
        obj = ArgDef.build("--a=b", settings={"assignment": ":"})
        assert(isinstance(obj, LongDef))
        assert(obj.names() == (None, "a=b"))

    @pytest.mark.parametrize("data", ["--a:b", {"long": "a:b"}, {"short": ":"}])
    def test_custom_assignment_fail(self, data):
        with pytest.raises(DefinitionError):
            ArgDef.build(data, settings={"assignment": ":"})
