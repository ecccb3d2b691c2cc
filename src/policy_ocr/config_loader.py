"""Configuration loader with Pydantic validation for the policy OCR module.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class InputConfig(BaseModel):
    """Input adapter configuration.

    Attributes:
        encoding: Text encoding of scanned source documents
    """

    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    """Output adapter configuration.

    Attributes:
        encoding: Text encoding of the written report
        create_parents: Create missing parent directories of the report file
    """

    encoding: str = "utf-8"
    create_parents: bool = True


class PipelineConfig(BaseModel):
    """Entry pipeline configuration.

    Attributes:
        max_workers: Number of threads recognizing entries (1 = sequential).
            Report order always follows source order.
    """

    max_workers: int = Field(default=1, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Root log level used by the command line entry point
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class PolicyOCRConfig(BaseModel):
    """Complete policy OCR module configuration."""

    input: InputConfig = InputConfig()
    output: OutputConfig = OutputConfig()
    pipeline: PipelineConfig = PipelineConfig()
    logging: LoggingConfig = LoggingConfig()


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        policy_ocr: Policy OCR module configuration
    """

    policy_ocr: PolicyOCRConfig = PolicyOCRConfig()


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    The file may either hold the module settings at top level or nest them
    under a ``policy_ocr`` key.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("src/policy_ocr/config.yaml"))
        >>> print(config.policy_ocr.pipeline.max_workers)
        1
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading policy OCR config from {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    if "policy_ocr" in config_dict:
        return Config(**config_dict)

    # Wrap flat YAML structure in 'policy_ocr' key for Config model
    return Config(policy_ocr=PolicyOCRConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from src/policy_ocr/config.yaml
    """
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
