"""
Configuration management for dopbroad.

Provides utilities for loading, validating and saving YAML/JSON configuration
files describing a detector setup and the moving gamma-ray source.
"""

import json
from numbers import Real
from pathlib import Path
from typing import Dict, Any, Union
import logging

import yaml

logger = logging.getLogger(__name__)

# Keys accepted in the 'broadening' section
REQUIRED_BROADENING_FIELDS = ["energy_mev", "beta"]
OPTIONAL_BROADENING_FIELDS = ["d_theta_deg", "resolution_const", "d_beta"]


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    config_path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    FileNotFoundError
        If config file does not exist
    ValueError
        If file format is not supported
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, "r") as f:
        if suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        elif suffix == ".json":
            config = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. " "Use .yaml, .yml, or .json"
            )

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {config_path} does not contain a mapping")

    logger.info(f"Loaded configuration from {config_path}")
    return config


def validate_broadening_config(config: Dict[str, Any]) -> bool:
    """
    Validate the structure of the 'broadening' configuration section.

    Only structure and types are checked here. Physical ranges (e.g.
    ``|beta| < 1``) are enforced when the parameters are bound to a model.

    Parameters
    ----------
    config : dict
        Configuration dictionary

    Returns
    -------
    bool
        True if valid

    Raises
    ------
    ValueError
        If configuration is invalid
    """
    if "broadening" not in config:
        raise ValueError("Configuration must contain 'broadening' section")

    section = config["broadening"]
    if not isinstance(section, dict):
        raise ValueError("'broadening' section must be a mapping")

    # Check required fields
    for field in REQUIRED_BROADENING_FIELDS:
        if field not in section:
            raise ValueError(f"Broadening config missing required field: {field}")

    known = REQUIRED_BROADENING_FIELDS + OPTIONAL_BROADENING_FIELDS
    unknown = sorted(set(section) - set(known))
    if unknown:
        raise ValueError(f"Unknown broadening config field(s): {unknown}. " f"Must be in: {known}")

    for field, value in section.items():
        # bool is a Real subclass but never a meaningful parameter value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValueError(f"Broadening config field '{field}' must be a number, got {value!r}")

    return True


def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """
    Save configuration to YAML or JSON file.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    config_path : str or Path
        Path to output file. Suffixes other than .json are written as YAML
        with a .yaml suffix.
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    if suffix == ".json":
        with open(config_path, "w") as f:
            json.dump(config, f, indent=2)
    else:
        if suffix not in [".yaml", ".yml"]:
            config_path = config_path.with_suffix(".yaml")
        with open(config_path, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")
