#!/usr/bin/env python3
"""
These are the tokargs specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import TokArgsError, SettingsError
from .parse import (MalformedArgument, ParseError, UnknownArgument,
                    UnknownLong, UnknownShort)
from .registry import (ConflictError, DefinitionError, DuplicateLong,
                       DuplicateShort, RegistryError)

# ##-- end 1st party imports
