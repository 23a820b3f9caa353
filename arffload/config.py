# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Reader configuration, optionally loaded from a YAML file.

Example file::

    encoding: latin-1
    comment_marker: "%"
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from .errors import ConfigError

__all__ = ["CONFIG_SCHEMA", "ReaderConfig", "load_config"]

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "encoding": {"type": "string", "minLength": 1},
        "comment_marker": {"type": "string", "minLength": 1},
    },
}


@dataclass(frozen=True)
class ReaderConfig:
    encoding: str = "utf-8"  # text encoding of the input lines
    comment_marker: str = "%"  # lines starting with it are dropped

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"unknown encoding: {self.encoding}") from e
        if not self.comment_marker:
            raise ConfigError("comment_marker must not be empty")


def _validate_config_schema(data) -> None:
    """Validate the parsed YAML document against CONFIG_SCHEMA.

    Raises:
        ConfigError: the document is not a mapping, has unknown keys, or
            holds values of the wrong type.
    """
    try:
        jsonschema.validate(data, CONFIG_SCHEMA)
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path) -> ReaderConfig:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    _validate_config_schema(data)
    return ReaderConfig(**data)
