# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `MatchEngine`, the single-pass matcher that resolves a
token stream against a `ParserConfig`.

Tokens are read left to right with one token of lookahead:
- `--name` looks up an optional argument by its long flag.
- `-x` (any `-` token longer than one character) looks up an optional argument
  by its short flag.
- Anything else is a bare token and fills the next unfilled required
  positional, in declaration order.

A flag that takes a value consumes the next token verbatim, even if that token
looks like a flag itself (unless the config enables `strict_values`). Flags may
appear before, after or between positionals; the Nth bare token always fills
the Nth declared positional.

Matching stops at the first error. No partial result is returned.

Example Usage:
    engine = MatchEngine(config)
    result = engine.parse(["42", "--verbose", "2"])
    # result == {"num": "42", "verbose": "2"}
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from argmatch.arg_spec import SWITCH_VALUE, ArgSpec, DuplicatePolicy
from argmatch.exceptions import (
    MissingRequiredError,
    MissingValueError,
    RepeatedFlagError,
    UnexpectedPositionalError,
    UnknownFlagError,
)
from argmatch.logger import logger
from argmatch.result_map import ResultMap

if TYPE_CHECKING:
    from argmatch.parser_config import ParserConfig


def looks_like_flag(token: str) -> bool:
    """Return True if `token` would be read as a short or long flag."""
    return token.startswith("-") and len(token) > 1


class MatchEngine:
    """
    Matches token streams against one `ParserConfig`.

    The engine holds no per-parse state; every call to `parse` builds its own
    result, so one engine may serve many streams.
    """

    def __init__(self, config: ParserConfig) -> None:
        self.config = config

    def _resolve_flag(self, token: str) -> ArgSpec | None:
        """Return the spec named by a flag token, or None for a bare token."""
        if token.startswith("--"):
            spec = self.config.find_long(token[2:])
        elif looks_like_flag(token):
            spec = self.config.find_short(token[1:])
        else:
            return None
        if spec is None:
            raise UnknownFlagError(token)
        return spec

    def _store(
        self, values: dict[str, str], spec: ArgSpec, token: str, value: str
    ) -> None:
        if spec.name in values:
            policy = self.config.duplicate_policy
            if policy == DuplicatePolicy.ERROR:
                raise RepeatedFlagError(spec.name, token)
            if policy == DuplicatePolicy.FIRST_WINS:
                logger.debug("Ignoring repeated '%s' for '%s'", token, spec.name)
                return
        values[spec.name] = value

    def parse(self, tokens: Iterable[str]) -> ResultMap:
        """
        Resolve `tokens` into a `ResultMap`.

        Args:
            tokens (Iterable[str]): Input tokens, program name already removed.

        Returns:
            ResultMap: Matched values keyed by argument name.

        Raises:
            UnknownFlagError: A flag token matches no optional argument.
            MissingValueError: A value-taking flag is the last token.
            UnexpectedPositionalError: More bare tokens than positionals.
            MissingRequiredError: Fewer bare tokens than positionals.
            RepeatedFlagError: A flag repeats under `DuplicatePolicy.ERROR`.
        """
        args = list(tokens)
        positionals = self.config.positionals
        values: dict[str, str] = {}
        cursor = 0
        i = 0

        while i < len(args):
            token = args[i]
            spec = self._resolve_flag(token)

            if spec is None:
                if cursor >= len(positionals):
                    raise UnexpectedPositionalError(token)
                name = positionals[cursor].name
                values[name] = token
                logger.debug("Matched positional '%s' -> %r", name, token)
                cursor += 1
                i += 1
                continue

            if not spec.takes_value:
                self._store(values, spec, token, SWITCH_VALUE)
                logger.debug("Matched switch '%s' for '%s'", token, spec.name)
                i += 1
                continue

            if i + 1 >= len(args):
                raise MissingValueError(spec.name, token)
            value = args[i + 1]
            if self.config.strict_values and looks_like_flag(value):
                raise MissingValueError(spec.name, token)
            self._store(values, spec, token, value)
            logger.debug("Matched option '%s' for '%s' -> %r", token, spec.name, value)
            i += 2

        if cursor < len(positionals):
            raise MissingRequiredError(positionals[cursor].name)

        logger.debug("Parsed %d tokens into %d values", len(args), len(values))
        return ResultMap(values)


def parse(tokens: Iterable[str], config: ParserConfig) -> ResultMap:
    """Match `tokens` against `config` and return the resulting `ResultMap`."""
    return MatchEngine(config).parse(tokens)
