# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ResultMap`, the read-only mapping produced by a successful parse.

Every required positional name is present after a successful parse. Optional
flag names are present only when their flag appeared in the token stream.
Values are always the raw text taken from the stream; converting them is left
to the caller.

Example:
    result = parse(["-v", "true", "42"], config)
    result.get("num")               # "42"
    result.get("missing", None)     # None
    result.contains("verbose")      # True
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from argmatch.exceptions import NameNotFoundError

_MISSING: Any = object()


class ResultMap(Mapping[str, str]):
    """Mapping from declared argument name to its matched text value."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, name: str, default: Any = _MISSING) -> Any:
        """
        Return the value matched for `name`.

        Args:
            name (str): Declared argument name.
            default (Any): Returned instead of raising when `name` is absent.

        Raises:
            NameNotFoundError: If `name` was never matched and no default is given.
        """
        if name in self._values:
            return self._values[name]
        if default is _MISSING:
            raise NameNotFoundError(name)
        return default

    def contains(self, name: str) -> bool:
        """Return True if `name` has a matched value."""
        return name in self._values

    def as_dict(self) -> dict[str, str]:
        """Return a new plain dict with the matched values."""
        return dict(self._values)

    def __getitem__(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise NameNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._values == dict(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ResultMap({self._values!r})"
