"""
Argmatch

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_spec import SWITCH_VALUE, ArgKind, ArgSpec, DuplicatePolicy
from .config import loader
from .exceptions import (
    ArgMatchError,
    ConfigError,
    DuplicateFlagError,
    DuplicateNameError,
    InvalidSpecError,
    MissingRequiredError,
    MissingValueError,
    NameNotFoundError,
    ParseError,
    RepeatedFlagError,
    UnexpectedPositionalError,
    UnknownFlagError,
)
from .match_engine import MatchEngine, parse
from .parser_config import ParserConfig
from .result_map import ResultMap
from .version import __version__

__all__ = [
    "ArgKind",
    "ArgMatchError",
    "ArgSpec",
    "ConfigError",
    "DuplicateFlagError",
    "DuplicateNameError",
    "DuplicatePolicy",
    "InvalidSpecError",
    "MatchEngine",
    "MissingRequiredError",
    "MissingValueError",
    "NameNotFoundError",
    "ParseError",
    "ParserConfig",
    "RepeatedFlagError",
    "ResultMap",
    "SWITCH_VALUE",
    "UnexpectedPositionalError",
    "UnknownFlagError",
    "loader",
    "parse",
    "__version__",
]
