"""Configuration management for the split/combine solver.

Hydra composes ``config.yaml`` with command-line overrides; the validators
reject out-of-range search and scaling parameters.
"""

from .config_manager import ConfigManager, load_config, default_config_dir
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'default_config_dir',
    'validate_config',
    'ConfigValidationError'
]
