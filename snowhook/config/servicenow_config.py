"""
ServiceNow connection configuration.

The credentials live in a small YAML file, by default
``config/servicenow.yml``::

    service_now:
      instance_name: "dev12345"
      user_name: "alertmanager"
      password: "secret"
"""

from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from snowhook.config.exceptions import ConfigurationError
from snowhook.utils.logger import get_module_logger

logger = get_module_logger(__name__)


class ServiceNowConfig(BaseModel):
    """Connection parameters for the ServiceNow instance."""
    
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    instance_name: str = Field(default="", description="Instance name (<name>.service-now.com) or base URL")
    user_name: str = Field(default="", description="ServiceNow API user")
    password: str = Field(default="", repr=False, description="ServiceNow API password")


class Config(BaseModel):
    """Top-level layout of the configuration file."""
    
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    service_now: ServiceNowConfig = Field(default_factory=ServiceNowConfig)


def load_config(config_file: Union[str, Path]) -> Config:
    """
    Load and validate the configuration file.
    
    Args:
        config_file: Path to the YAML configuration file
        
    Returns:
        Validated Config instance
        
    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML
            or does not match the expected layout
    """
    config_path = Path(config_file)
    
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {config_path}: {e}") from e
    
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping, got {type(raw_config).__name__}"
        )
    
    try:
        config = Config.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
    
    logger.debug(f"Loaded ServiceNow configuration from {config_path}")
    return config
