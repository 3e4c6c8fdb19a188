r"""
'     ____  _    _ _____  _____  _____
'    / ___|| |  | |_   _|/ ____|/ ____|
'    \___ \| |/\| | | | | (___ | (___
'     ___) |  /\  | | |  \___ \ \___ \
'    |____/|_/  \_|_____|_____/ |____/
"""
import logging

# expose the main class
from .collection import Collection

# expose the factory functions
from .factories import (
    create,
    from_entries,
    from_range,
    repeat,
    empty,
    sc,
    swiss
)

# expose the comparison policy and record shapes
from .comparison import EqualityPolicy, loose_equals, strict_equals, compare_values
from .records import Shape, shape_of

# expose errors and sentinels
from .errors import SwissError, TypeMismatch, MissingKeyError
from .types import MISSING, mutating, is_mutating

# expose runtime settings
from .config import settings, configure

# library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Collection",
    "create",
    "from_entries",
    "from_range",
    "repeat",
    "empty",
    "sc",
    "swiss",
    "EqualityPolicy",
    "loose_equals",
    "strict_equals",
    "compare_values",
    "Shape",
    "shape_of",
    "SwissError",
    "TypeMismatch",
    "MissingKeyError",
    "MISSING",
    "mutating",
    "is_mutating",
    "settings",
    "configure"
]
