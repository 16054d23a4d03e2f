"""Configuration validation for the split/combine solver."""

import logging
from typing import Any, List
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

MAX_DEPTH_LIMIT = 12


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_solver_config(config.get('solver', {}))
        validate_scaling_config(config.get('scaling', {}))
        validate_search_config(config.get('search', {}))

        for warning in validate_parameter_ranges(config):
            logger.warning(warning)

        logger.info("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_solver_config(solver_config: DictConfig) -> None:
    """Validate solver configuration section.

    Args:
        solver_config: Solver configuration section
    """
    if not solver_config:
        return

    name = solver_config.get('name', 'split-solver')
    if not isinstance(name, str) or not name:
        raise ConfigValidationError(f"solver.name must be a non-empty string, got {name}")


def validate_scaling_config(scaling_config: DictConfig) -> None:
    """Validate scaling configuration section.

    Args:
        scaling_config: Scaling configuration section
    """
    if not scaling_config:
        return

    factor = scaling_config.get('factor', 1000)
    if not _is_int(factor) or factor <= 0:
        raise ConfigValidationError(
            f"scaling.factor must be positive integer, got {factor}"
        )


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    max_depth = search_config.get('max_depth', 6)
    if not _is_int(max_depth) or max_depth < 0 or max_depth > MAX_DEPTH_LIMIT:
        raise ConfigValidationError(
            f"search.max_depth must be integer between 0 and {MAX_DEPTH_LIMIT}, got {max_depth}"
        )

    tracking = search_config.get('statistics_tracking', True)
    if not isinstance(tracking, bool):
        raise ConfigValidationError(
            f"search.statistics_tracking must be a boolean, got {tracking}"
        )


def validate_parameter_ranges(config: DictConfig) -> List[str]:
    """Validate parameter ranges and return warnings.

    Args:
        config: Configuration to validate

    Returns:
        List of warning messages
    """
    warnings = []

    search_config = config.get('search', {})
    if search_config:
        max_depth = search_config.get('max_depth', 6)
        if max_depth > 7:
            warnings.append(
                f"search.max_depth {max_depth} grows the state space combinatorially; "
                f"exhaustive runs may take a long time"
            )

    scaling_config = config.get('scaling', {})
    if scaling_config:
        factor = scaling_config.get('factor', 1000)
        if factor < 100:
            warnings.append(f"scaling.factor {factor} truncates values to fewer than 2 decimals")

    return warnings
