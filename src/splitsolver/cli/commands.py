"""CLI command implementations."""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from omegaconf import DictConfig, OmegaConf

from splitsolver import __version__
from splitsolver.config import load_config, validate_config, ConfigValidationError
from splitsolver.core.scaling import SCALE_FACTOR
from splitsolver.search.best_first import (
    DEFAULT_MAX_DEPTH, BestFirstSearcher, SearchResult, create_searcher
)

from .utils import save_results, format_duration, print_search_stats

logger = logging.getLogger(__name__)


class SplitSolver:
    """Wires the loaded configuration into a searcher."""

    def __init__(self, config_overrides: Optional[List[str]] = None,
                 config: Optional[DictConfig] = None):
        """Initialize solver.

        Args:
            config_overrides: List of Hydra configuration overrides
            config: Already-loaded configuration (skips loading)
        """
        if config is None:
            try:
                config = load_config(overrides=config_overrides or [])
            except Exception as e:
                logger.error(f"Failed to load configuration: {e}")
                raise
        self.config = config

        self.searcher: BestFirstSearcher = create_searcher(
            max_depth=int(OmegaConf.select(config, 'search.max_depth', default=DEFAULT_MAX_DEPTH)),
            scale_factor=int(OmegaConf.select(config, 'scaling.factor', default=SCALE_FACTOR)),
            statistics_tracking=bool(OmegaConf.select(config, 'search.statistics_tracking', default=True))
        )

        logger.info(f"Solver initialized (max depth {self.searcher.config.max_depth}, "
                    f"scale factor {self.searcher.config.scale_factor})")

    def solve(self, inputs: Sequence[float], target: float, margin: float) -> SearchResult:
        return self.searcher.search(inputs, target, margin)


def _build_overrides(args) -> List[str]:
    overrides = []
    if getattr(args, 'max_depth', None) is not None:
        overrides.append(f"search.max_depth={args.max_depth}")
    if getattr(args, 'config', None):
        overrides.extend(args.config)
    return overrides


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        solver = SplitSolver(_build_overrides(args))
    except Exception:
        # load failure was already logged by SplitSolver
        return 1

    start_time = time.perf_counter()
    result = solver.solve(args.inputs, args.target, args.margin)
    total_time = time.perf_counter() - start_time

    if result.success:
        solution = result.solution
        print(f"Final Outputs: {solution.final}")
        print(f"Remainder: {solution.remainder}")
        for step in solution.path:
            print(step)
    else:
        print("No solution found.")

    if args.output:
        payload: Dict[str, Any] = result.to_dict()
        payload.update({
            'inputs': list(args.inputs),
            'target': args.target,
            'margin': args.margin,
            'solver_version': __version__,
            'total_time': total_time,
            'timestamp': time.time()
        })
        save_results(payload, args.output)
        logger.info(f"Results saved to {args.output}")

    if not args.quiet:
        if args.verbose > 0:
            print_search_stats(result.statistics)
        print(f"Total time taken: {format_duration(total_time)}")

    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = load_config(overrides=_build_overrides(args), validate=False)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=_build_overrides(args), validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
