# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by argmatch.

Declaration problems are raised while a `ParserConfig` is being built, before
any token is matched. Parse problems are raised by a single `parse` call and
stop matching at the first offending token. Lookup problems are raised by
`ResultMap` accessors.

All exceptions inherit from `ArgMatchError`, the base exception for the library.

Exception Hierarchy:
- ArgMatchError
    ├── ConfigError
    │   ├── DuplicateNameError
    │   ├── DuplicateFlagError
    │   └── InvalidSpecError
    ├── ParseError
    │   ├── UnknownFlagError
    │   ├── MissingValueError
    │   ├── UnexpectedPositionalError
    │   ├── MissingRequiredError
    │   └── RepeatedFlagError
    └── NameNotFoundError (also a KeyError)
"""


class ArgMatchError(Exception):
    """Base exception for argmatch."""


class ConfigError(ArgMatchError):
    """Raised when an argument declaration cannot be registered."""


class DuplicateNameError(ConfigError):
    """Raised when a name is already used by a registered argument."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Argument name '{name}' is already registered")


class DuplicateFlagError(ConfigError):
    """Raised when a short or long flag is already used by an optional argument."""

    def __init__(self, flag: str, existing: str) -> None:
        self.flag = flag
        self.existing = existing
        super().__init__(f"Flag '{flag}' is already used by argument '{existing}'")


class InvalidSpecError(ConfigError):
    """Raised when an argument declaration has an impossible shape."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class ParseError(ArgMatchError):
    """Raised when a token stream does not match the declared arguments."""


class UnknownFlagError(ParseError):
    """Raised for a flag token that no optional argument declares."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognized option '{token}'")


class MissingValueError(ParseError):
    """Raised when a flag that takes a value has no usable value token after it."""

    def __init__(self, name: str, flag: str) -> None:
        self.name = name
        self.flag = flag
        super().__init__(f"Option '{flag}' requires a value for '{name}'")


class UnexpectedPositionalError(ParseError):
    """Raised for a bare token once every positional argument is filled."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unexpected positional argument: '{token}'")


class MissingRequiredError(ParseError):
    """Raised when the stream ends before a required positional is filled."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required argument '{name}'")


class RepeatedFlagError(ParseError):
    """Raised for a second occurrence of a flag under the `error` duplicate policy."""

    def __init__(self, name: str, token: str) -> None:
        self.name = name
        self.token = token
        super().__init__(f"Option '{token}' given more than once for '{name}'")


class NameNotFoundError(ArgMatchError, KeyError):
    """Raised when a name is absent from a `ResultMap`."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No value for argument '{self.name}'"
