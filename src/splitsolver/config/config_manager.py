"""Hydra-backed loading of the solver configuration.

The default configuration ships inside the package (``splitsolver/conf``), so
an installed console script finds it without a checkout. Setting
``SPLITSOLVER_CONFIG_DIR`` points the loader at another directory.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from omegaconf import DictConfig
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from .validators import validate_config

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "SPLITSOLVER_CONFIG_DIR"
PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "conf"


def default_config_dir() -> Path:
    """Directory to compose from: ``$SPLITSOLVER_CONFIG_DIR`` or the packaged ``conf``."""
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    return Path(env_dir) if env_dir else PACKAGE_CONFIG_DIR


class ConfigManager:
    """Composes and validates a configuration from one directory."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Directory holding ``config.yaml``; defaults to
                :func:`default_config_dir`

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        self.config_dir = Path(config_dir or default_config_dir()).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Using configuration directory {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``config_name`` with Hydra overrides applied.

        Args:
            config_name: Config file name without ``.yaml``
            overrides: Hydra override strings such as ``search.max_depth=4``
            validate: Run :func:`validate_config` on the result

        Returns:
            The composed configuration

        Raises:
            ConfigValidationError: If ``validate`` is set and a value is out of range
        """
        overrides = list(overrides or [])

        # compose refuses to run while a previous Hydra instance is live
        GlobalHydra.instance().clear()
        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides)

        if validate:
            validate_config(cfg)

        self.config = cfg
        if overrides:
            logger.info(f"Loaded {config_name} with overrides {overrides}")
        else:
            logger.info(f"Loaded {config_name}")
        return cfg


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load a configuration through a fresh :class:`ConfigManager`."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)
