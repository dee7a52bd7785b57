"""
Configuration management using Pydantic for validation and type checking.
"""

import os
import yaml
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class NetworkConfig(BaseModel):
    """DNN execution configuration."""
    backend: Literal["opencv", "cuda"] = Field(
        default="opencv", description="Preferable DNN backend"
    )
    target: Literal["cpu", "opencl", "cuda"] = Field(
        default="cpu", description="Preferable DNN target device"
    )


class DisplayConfig(BaseModel):
    """Display window configuration."""
    window_title: str = Field(
        default="Real-Time Object Detection", description="Window title"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", description="Logging level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid logging level. Must be one of {valid_levels}")
        return v


class Config(BaseModel):
    """Main configuration class."""
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with sensible defaults.

    Args:
        config_path: Path to configuration file. If None, defaults are used.

    Returns:
        Config object with loaded settings.
    """
    if config_path is None or not os.path.exists(config_path):
        return Config()

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)

        # Handle empty file
        if config_dict is None:
            return Config()

        return Config(**config_dict)
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration from {config_path}: {e}")


def save_example_config(output_path: str) -> None:
    """
    Save an example configuration file with comments.

    Args:
        output_path: Where to save the example config.
    """
    example_yaml = """# DNN execution settings (no fallback if unavailable)
network:
  backend: "opencv"      # opencv, cuda
  target: "cpu"          # cpu, opencl, cuda

# Display window
display:
  window_title: "Real-Time Object Detection"

# Logging
logging:
  level: "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        f.write(example_yaml)
