import os

import yaml
from pydantic import BaseModel, ValidationError, validate_call

from showcase.models.logging import logger


@validate_call
def convert_model_to_dict(model: BaseModel, exclude_none: bool = False) -> dict:
    """
    Convert a Pydantic model to a JSON-compatible dictionary.

    Args:
        model: The Pydantic model to convert
        exclude_none: If True, fields with None values will be excluded
    """
    return model.model_dump(mode="json", exclude_none=exclude_none)


@validate_call
def get_config(filename: str) -> dict:
    """
    Get the config file.
    """
    if not filename.endswith((".yaml", ".yml")):
        raise ValueError("Invalid config file. Must be a YAML file.")
    if not os.path.exists(filename):
        raise FileNotFoundError(f"The file '{filename}' does not exist.")
    if not os.path.isfile(filename):
        raise ValueError(f"'{filename}' is not a file.")
    with open(filename) as f:
        yaml_data = yaml.safe_load(f)
    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        raise ValueError("Invalid config file: expected a dictionary.")
    return yaml_data


def validate_model_config(config: dict, pydantic_model: type[BaseModel]) -> BaseModel:
    """
    Load and validate the YAML configuration against ``pydantic_model``.
    """
    if not isinstance(config, dict):
        raise ValueError("Invalid config. Must be a dictionary.")
    try:
        data = pydantic_model(**config)
    except ValidationError as e:
        logger.error(f"Validation error: {e}")
        raise ValueError(f"Validation error: {e}") from e
    logger.debug(f"Validated config: {data}")
    return data
