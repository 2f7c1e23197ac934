import pytest

from argmatch import (
    MissingRequiredError,
    MissingValueError,
    ParseError,
    ParserConfig,
    ResultMap,
    UnexpectedPositionalError,
    UnknownFlagError,
    parse,
)


@pytest.fixture
def config():
    config = ParserConfig()
    config.add_positional("num")
    config.add_optional("verbose", short="v", long="verbose")
    return config


def test_short_flag_before_positional(config):
    result = parse(["-v", "true", "42"], config)
    assert result == {"num": "42", "verbose": "true"}


def test_flag_absent(config):
    result = parse(["42"], config)
    assert result == {"num": "42"}
    assert not result.contains("verbose")


def test_empty_stream_missing_required(config):
    with pytest.raises(MissingRequiredError) as exc_info:
        parse([], config)
    assert exc_info.value.name == "num"
    assert str(exc_info.value) == "Missing required argument 'num'"


def test_unknown_long_flag(config):
    with pytest.raises(UnknownFlagError) as exc_info:
        parse(["42", "--unknown", "x"], config)
    assert exc_info.value.token == "--unknown"


def test_unknown_short_flag(config):
    with pytest.raises(UnknownFlagError) as exc_info:
        parse(["-f", "x", "42"], config)
    assert exc_info.value.token == "-f"


def test_long_flag_after_positional(config):
    assert parse(["42", "--verbose", "2"], config) == {"num": "42", "verbose": "2"}


def test_missing_value(config):
    with pytest.raises(MissingValueError) as exc_info:
        parse(["42", "--verbose"], config)
    assert exc_info.value.name == "verbose"
    assert exc_info.value.flag == "--verbose"


def test_unexpected_positional(config):
    with pytest.raises(UnexpectedPositionalError) as exc_info:
        parse(["42", "43"], config)
    assert exc_info.value.token == "43"


def test_parse_errors_share_base(config):
    for tokens in ([], ["--nope"], ["42", "-v"], ["1", "2"]):
        with pytest.raises(ParseError):
            parse(tokens, config)


def test_parse_via_config(config):
    assert config.parse(["42"]) == parse(["42"], config)


def test_result_type(config):
    assert isinstance(parse(["42"], config), ResultMap)


def test_accepts_any_iterable(config):
    tokens = iter(["-v", "1", "42"])
    assert parse(tokens, config) == {"num": "42", "verbose": "1"}
    assert parse(("42",), config) == {"num": "42"}


def test_tokens_not_mutated(config):
    tokens = ["-v", "1", "42"]
    parse(tokens, config)
    assert tokens == ["-v", "1", "42"]


def test_no_declarations():
    config = ParserConfig()
    assert parse([], config) == {}
    with pytest.raises(UnexpectedPositionalError):
        parse(["x"], config)


def test_only_flags_no_positionals():
    config = ParserConfig()
    config.add_optional("out", short="o", long="output")
    assert parse([], config) == {}
    assert parse(["-o", "a.txt"], config) == {"out": "a.txt"}
    assert parse(["--output", "b.txt"], config) == {"out": "b.txt"}


def test_single_dash_is_positional(config):
    assert parse(["-"], config) == {"num": "-"}


def test_double_dash_alone_is_unknown_flag(config):
    with pytest.raises(UnknownFlagError) as exc_info:
        parse(["--", "42"], config)
    assert exc_info.value.token == "--"


def test_negative_number_is_flag_token(config):
    with pytest.raises(UnknownFlagError):
        parse(["-5"], config)


def test_bundled_short_flags_not_supported():
    config = ParserConfig()
    config.add_optional("a", short="a", takes_value=False)
    config.add_optional("b", short="b", takes_value=False)
    with pytest.raises(UnknownFlagError) as exc_info:
        parse(["-ab"], config)
    assert exc_info.value.token == "-ab"


def test_long_name_given_with_single_dash():
    config = ParserConfig()
    config.add_optional("verbose", long="verbose")
    with pytest.raises(UnknownFlagError):
        parse(["-verbose", "1"], config)


def test_short_name_given_with_double_dash():
    config = ParserConfig()
    config.add_optional("verbose", short="v")
    with pytest.raises(UnknownFlagError):
        parse(["--v", "1"], config)


def test_equals_syntax_not_split(config):
    with pytest.raises(UnknownFlagError) as exc_info:
        parse(["--verbose=1", "42"], config)
    assert exc_info.value.token == "--verbose=1"


def test_empty_string_token_is_positional(config):
    assert parse([""], config) == {"num": ""}


def test_first_error_wins(config):
    with pytest.raises(UnknownFlagError):
        parse(["--nope", "1", "2", "3"], config)
