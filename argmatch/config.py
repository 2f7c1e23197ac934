# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration file loader for argmatch parser configurations."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from argmatch.arg_spec import ArgKind, ArgSpec, DuplicatePolicy
from argmatch.logger import logger
from argmatch.parser_config import ParserConfig


class RawArgSpec(BaseModel):
    """Raw argument entry from a declaration file."""

    name: str
    kind: ArgKind = ArgKind.REQUIRED_POSITIONAL
    short: str | None = None
    long: str | None = None
    takes_value: bool = True
    help: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgKind:
        return ArgKind(value)

    def to_arg_spec(self) -> ArgSpec:
        return ArgSpec(
            name=self.name,
            kind=self.kind,
            short=self.short,
            long=self.long,
            takes_value=self.takes_value,
            help=self.help,
        )


class ArgMatchConfig(BaseModel):
    """argmatch declaration file model."""

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
    strict_values: bool = False
    arguments: list[RawArgSpec] = Field(default_factory=list)

    @field_validator("duplicate_policy", mode="before")
    @classmethod
    def validate_duplicate_policy(cls, value: Any) -> DuplicatePolicy:
        return DuplicatePolicy(value)

    def to_parser_config(self) -> ParserConfig:
        config = ParserConfig(
            duplicate_policy=self.duplicate_policy,
            strict_values=self.strict_values,
        )
        config.register_all(raw.to_arg_spec() for raw in self.arguments)
        return config


def from_mapping(raw_config: Any) -> ParserConfig:
    """
    Build a `ParserConfig` from an already-loaded declaration mapping.

    Raises:
        ValueError: If `raw_config` is not a mapping.
        pydantic.ValidationError: If an entry is malformed.
        ConfigError: If the declarations conflict.
    """
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration must be a dictionary with a list of arguments.\n"
            "Example:\n"
            "arguments:\n"
            "  - name: 'num'\n"
            "    kind: 'positional'\n"
            "  - name: 'verbose'\n"
            "    kind: 'flag'\n"
            "    short: 'v'"
        )
    return ArgMatchConfig.model_validate(raw_config).to_parser_config()


def loader(file_path: Path | str) -> ParserConfig:
    """
    Load a parser configuration from a YAML or TOML file.

    The file should contain a dictionary with a list of arguments. Each entry
    needs at least a `name`; `kind` defaults to a required positional.

    Args:
        file_path (str | Path): Path to the declaration file.

    Returns:
        ParserConfig: The registered configuration.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or not a mapping.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    config = from_mapping(raw_config)
    logger.debug("Loaded %s from '%s'", config, path)
    return config
