#!/usr/bin/env python3
"""
The root of the tokargs error hierarchy.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"TokArgsError",
"SettingsError",

)
# ##-- end Generated Exports

# Body:

class TokArgsError(Exception):
    """
      The base class for all tokargs Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific tokargs Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, IndexError):
            return str(self.args)

class SettingsError(TokArgsError):
    """ Parser settings could not be built from the provided data """
    general_msg = "tokargs Settings Failure:"
    pass
