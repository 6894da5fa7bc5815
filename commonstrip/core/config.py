"""Configuration model and loading."""

import argparse
import json

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from commonstrip.core.types import OffsetPolicy
from commonstrip.utils.constants import Constants
from commonstrip.utils.helpers import expand_file_path


class Config(BaseModel):
    """Settings for one removal run."""

    model_config = ConfigDict(extra="forbid")

    source: str = Constants.DEFAULT_SOURCE
    target: str = Constants.DEFAULT_TARGET
    max_length: int = Field(default=Constants.DEFAULT_MAX_LENGTH, ge=1)
    offset_policy: OffsetPolicy = OffsetPolicy.LITERAL
    max_rounds: int | None = Field(default=None, ge=1)
    output: str | None = None
    report_format: str = "yaml"
    verbose: bool = False
    debug: bool = False

    @field_validator("report_format")
    @classmethod
    def normalize_report_format(cls, value: str) -> str:
        """Lowercase the report format and check it is supported."""
        value = value.lower()
        if value not in Constants.REPORT_FORMATS:
            raise ValueError(
                f"report_format must be one of {', '.join(Constants.REPORT_FORMATS)}"
            )
        return value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Debug output is only shown alongside verbose output."""
        if self.debug:
            self.verbose = True
        self.output = expand_file_path(self.output)
        return self


def _read_config_file(config_file: str, parser: argparse.ArgumentParser) -> dict:
    """Read a JSON config file, reporting problems through the parser."""
    path = expand_file_path(config_file)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"Could not read config file {config_file}: {e}")

    if not isinstance(data, dict):
        parser.error(f"Config file {config_file} must contain a JSON object")
    return data


def load_config(
    config_file: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Build the configuration from an optional JSON file and CLI arguments.

    CLI values override JSON values. Arguments left at None (or flags left
    unset) do not override anything.

    Args:
        config_file: Path to a JSON config file, or None
        args: Parsed command-line arguments
        parser: Parser used to report errors

    Returns:
        Validated Config
    """
    data = _read_config_file(config_file, parser) if config_file else {}

    for key in Config.model_fields:
        value = getattr(args, key, None)
        if value is None or value is False:
            continue
        data[key] = value

    try:
        return Config(**data)
    except ValidationError as e:
        parser.error(f"Invalid configuration: {e}")
        raise  # parser.error exits
