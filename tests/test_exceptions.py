import pytest

from argmatch.exceptions import (
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


@pytest.mark.parametrize(
    "error,base,message",
    [
        (
            DuplicateNameError("num"),
            ConfigError,
            "Argument name 'num' is already registered",
        ),
        (
            DuplicateFlagError("-v", "verbose"),
            ConfigError,
            "Flag '-v' is already used by argument 'verbose'",
        ),
        (
            InvalidSpecError("num", "bad shape"),
            ConfigError,
            "Invalid argument 'num': bad shape",
        ),
        (UnknownFlagError("--nope"), ParseError, "Unrecognized option '--nope'"),
        (
            MissingValueError("verbose", "-v"),
            ParseError,
            "Option '-v' requires a value for 'verbose'",
        ),
        (
            UnexpectedPositionalError("43"),
            ParseError,
            "Unexpected positional argument: '43'",
        ),
        (MissingRequiredError("num"), ParseError, "Missing required argument 'num'"),
        (
            RepeatedFlagError("verbose", "--verbose"),
            ParseError,
            "Option '--verbose' given more than once for 'verbose'",
        ),
        (NameNotFoundError("num"), KeyError, "No value for argument 'num'"),
    ],
)
def test_messages_and_hierarchy(error, base, message):
    assert isinstance(error, base)
    assert isinstance(error, ArgMatchError)
    assert str(error) == message


def test_name_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        raise NameNotFoundError("num")
