# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Flagline flag sets.

A flag set file declares the flags a program accepts together with its operand
limit, so the parser can be configured without code:

    operand_limit: 2
    debug: false
    log_mode: cli
    log_file: flagline.log
    flags:
      - flag: "-v"
      - flag: "--depth"
        behavior: arg_required
      - flag: "--range"
        behavior: sep_optional
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from flagline.exceptions import MalformedFlagNameError
from flagline.logger import logger
from flagline.parser.flag_behavior import FlagBehavior
from flagline.parser.flag_parser import FlagParser
from flagline.parser.flag_rule import validate_spelling
from flagline.utils import setup_logging


class RawFlag(BaseModel):
    """Raw flag model for Flagline configuration."""

    flag: str
    behavior: FlagBehavior = FlagBehavior.BLANK

    @field_validator("flag")
    @classmethod
    def validate_flag(cls, value: str) -> str:
        try:
            validate_spelling(value)
        except MalformedFlagNameError as error:
            raise ValueError(error.message) from error
        return value

    @field_validator("behavior", mode="before")
    @classmethod
    def validate_behavior(cls, value: Any) -> FlagBehavior:
        if value is None:
            return FlagBehavior.BLANK
        if isinstance(value, FlagBehavior):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"behavior must be one of {FlagBehavior.choices()}, got {value!r}"
            )
        return FlagBehavior(value)


class FlagSetConfig(BaseModel):
    """Flagline flag set configuration model."""

    operand_limit: int = Field(default=1, ge=0)
    debug: bool = False
    log_mode: Literal["cli", "json"] | None = None
    log_file: str | None = None
    json_log_to_file: bool = False
    flags: list[RawFlag] = Field(default_factory=list)

    def configure_logging(self) -> None:
        if self.log_mode or self.log_file:
            setup_logging(
                mode=self.log_mode,
                log_filename=self.log_file,
                json_log_to_file=self.json_log_to_file,
            )

    def to_parser(self) -> FlagParser:
        self.configure_logging()
        parser = FlagParser(operand_limit=self.operand_limit, debug=self.debug)
        parser.register_many((raw.flag, raw.behavior) for raw in self.flags)
        return parser


def loader(file_path: Path | str) -> FlagParser:
    """
    Load a Flagline flag set from a YAML or TOML file.

    The file should contain a dictionary with a list of flags. Each flag entry
    needs at least a `flag` spelling and may give a `behavior`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        FlagParser: A parser with every flag registered.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is invalid.
        DuplicateFlagError: If two entries declare the same flag.
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

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "operand_limit: 1\n"
            "flags:\n"
            "  - flag: '--depth'\n"
            "    behavior: 'arg_required'"
        )

    config = FlagSetConfig.model_validate(raw_config)
    if config.log_file:
        config.log_file = str(path.parent / config.log_file)
    logger.debug("Loaded %d flag(s) from '%s'", len(config.flags), path)
    return config.to_parser()
