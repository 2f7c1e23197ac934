# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParserConfig`, the append-only registry of argument
declarations that a `MatchEngine` matches token streams against.

Required positionals are kept in declaration order, which decides which bare
token fills which argument. Optional flags are indexed by their short and long
identifiers, so their registration order does not matter.

Public Interface:
- `register(spec)`: Validate and add a single `ArgSpec`.
- `register_all(specs)`: Register several specs in order.
- `add_positional(...)` / `add_optional(...)`: Build and register a spec.
- `parse(tokens)`: Match a token stream against this configuration.
- `usage(program)`: Plain-text synopsis of the declared arguments.
- `to_definition_list()`: Serializable view of the declarations.

Example Usage:
    config = ParserConfig()
    config.add_positional("num")
    config.add_optional("verbose", short="v", long="verbose")

    result = config.parse(["-v", "true", "42"])
    # result == {"num": "42", "verbose": "true"}

A config is never mutated while parsing, so a fully built instance can be
shared by concurrent `parse` calls without locking.
"""
from __future__ import annotations

from typing import Any, Iterable

from argmatch.arg_spec import ArgSpec, DuplicatePolicy
from argmatch.exceptions import DuplicateFlagError, DuplicateNameError
from argmatch.logger import logger
from argmatch.match_engine import MatchEngine
from argmatch.result_map import ResultMap


class ParserConfig:
    """
    Ordered collection of argument declarations.

    Args:
        duplicate_policy (DuplicatePolicy | str): How repeated flags are handled.
        strict_values (bool): Reject flag values that look like flags themselves.
    """

    def __init__(
        self,
        duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.LAST_WINS,
        strict_values: bool = False,
    ) -> None:
        self.duplicate_policy: DuplicatePolicy = DuplicatePolicy(duplicate_policy)
        self.strict_values: bool = strict_values
        self._specs: list[ArgSpec] = []
        self._positional: list[ArgSpec] = []
        self._names: dict[str, ArgSpec] = {}
        self._short_map: dict[str, ArgSpec] = {}
        self._long_map: dict[str, ArgSpec] = {}

    def register(self, spec: ArgSpec) -> None:
        """
        Add an argument declaration.

        Raises:
            InvalidSpecError: If the spec shape is invalid.
            DuplicateNameError: If the name is already registered.
            DuplicateFlagError: If the short or long flag is already registered.
        """
        spec.validate()
        if spec.name in self._names:
            raise DuplicateNameError(spec.name)
        if spec.short is not None and spec.short in self._short_map:
            raise DuplicateFlagError(f"-{spec.short}", self._short_map[spec.short].name)
        if spec.long is not None and spec.long in self._long_map:
            raise DuplicateFlagError(f"--{spec.long}", self._long_map[spec.long].name)

        self._specs.append(spec)
        self._names[spec.name] = spec
        if spec.is_positional:
            self._positional.append(spec)
        else:
            if spec.short is not None:
                self._short_map[spec.short] = spec
            if spec.long is not None:
                self._long_map[spec.long] = spec
        logger.debug("Registered %s argument '%s'", spec.kind, spec.name)

    def register_all(self, specs: Iterable[ArgSpec]) -> None:
        """Register each spec in order, stopping at the first failure."""
        for spec in specs:
            self.register(spec)

    def add_positional(self, name: str, help: str = "") -> ArgSpec:
        """Declare the next required positional argument."""
        spec = ArgSpec.positional(name, help=help)
        self.register(spec)
        return spec

    def add_optional(
        self,
        name: str,
        short: str | None = None,
        long: str | None = None,
        takes_value: bool = True,
        help: str = "",
    ) -> ArgSpec:
        """Declare an optional flag argument."""
        spec = ArgSpec.optional(
            name, short=short, long=long, takes_value=takes_value, help=help
        )
        self.register(spec)
        return spec

    @property
    def specs(self) -> tuple[ArgSpec, ...]:
        """All declarations in registration order."""
        return tuple(self._specs)

    @property
    def positionals(self) -> tuple[ArgSpec, ...]:
        """Required positionals in the order they are filled."""
        return tuple(self._positional)

    @property
    def optionals(self) -> tuple[ArgSpec, ...]:
        return tuple(spec for spec in self._specs if not spec.is_positional)

    def get_spec(self, name: str) -> ArgSpec | None:
        return self._names.get(name)

    def find_long(self, long: str) -> ArgSpec | None:
        """Return the optional argument whose long flag is `long`, if any."""
        return self._long_map.get(long)

    def find_short(self, short: str) -> ArgSpec | None:
        """Return the optional argument whose short flag is `short`, if any."""
        return self._short_map.get(short)

    def parse(self, tokens: Iterable[str]) -> ResultMap:
        """Match `tokens` against this configuration."""
        return MatchEngine(self).parse(tokens)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert the declarations into a list of plain dicts.

        Returns:
            List of definitions in registration order, suitable for export.
        """
        return [
            {
                "name": spec.name,
                "kind": spec.kind.value,
                "short": spec.short,
                "long": spec.long,
                "takes_value": spec.takes_value,
                "help": spec.help,
            }
            for spec in self._specs
        ]

    def usage(self, program: str | None = None) -> str:
        """
        Render a one-line synopsis of the declared arguments.

        Optional flags come first in brackets, followed by the positionals in
        the order they are filled.
        """
        parts = [program] if program else []
        for spec in self.optionals:
            flag = spec.flags[0]
            if spec.takes_value:
                parts.append(f"[{flag} {spec.name.upper()}]")
            else:
                parts.append(f"[{flag}]")
        parts.extend(spec.name for spec in self._positional)
        return " ".join(parts)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserConfig):
            return False
        return (
            self._specs == other._specs
            and self.duplicate_policy == other.duplicate_policy
            and self.strict_values == other.strict_values
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Return a human-readable summary of the declarations."""
        optional = len(self._specs) - len(self._positional)
        flags = len(self._short_map) + len(self._long_map)
        return (
            f"ParserConfig(args={len(self._specs)}, "
            f"positional={len(self._positional)}, optional={optional}, "
            f"flags={flags})"
        )

    def __repr__(self) -> str:
        return str(self)
