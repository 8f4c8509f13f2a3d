"""Tools related to intersect3d configuration"""

import logging
from math import isfinite
from typing import Literal, Mapping

import yaml

from expression import Option, Result
from gertils import ExtantFile

from . import DEFAULT_PRECISION
from .exceptions import ConfigurationValueError
from .numeric_types import is_real_number

__all__ = ["PRECISION_KEY", "get_precision", "read_configuration_file", "validate_precision"]


PRECISION_KEY: Literal["precision"] = "precision"


def get_precision(conf_data: Mapping[str, object]) -> Result[float, ConfigurationValueError]:
    """Get the tolerance for intersection checks, falling back to the default when the key is absent."""
    return Option.of_optional(conf_data.get(PRECISION_KEY))\
        .map(validate_precision)\
        .default_value(Result.Ok(DEFAULT_PRECISION))\
        .map_error(ConfigurationValueError)


def read_configuration_file(config_file: ExtantFile) -> Mapping[str, object]:
    """Parse an intersect3d configuration file from YAML."""
    logging.info("Reading intersect3d configuration file: %s", config_file.path)
    with open(config_file.path, "r") as fh:
        conf_data = yaml.safe_load(fh)
    # An empty file parses as None, which we treat as an empty configuration.
    if conf_data is None:
        return {}
    if not isinstance(conf_data, Mapping):
        raise ConfigurationValueError(
            f"Configuration file ({config_file.path}) must contain a mapping, not {type(conf_data).__name__}"
        )
    return conf_data


def validate_precision(value: object) -> Result[float, str]:
    if not is_real_number(value):
        return Result.Error(f"Precision ('{PRECISION_KEY}') has value of illegal type: {type(value).__name__}")
    if not isfinite(value) or value <= 0:
        return Result.Error(f"Precision ('{PRECISION_KEY}') must be finite and positive: {value}")
    return Result.Ok(float(value))
