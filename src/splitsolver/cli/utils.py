"""CLI utility functions."""

import argparse
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Hydra is chatty at INFO while composing
    logging.getLogger('hydra').setLevel(logging.WARNING)


def parse_real(text: str) -> float:
    """Parse a finite real number for argparse.

    Raises:
        argparse.ArgumentTypeError: If the text is not a finite number
    """
    try:
        value = float(text.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: '{text}'")
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"value must be finite: '{text}'")
    return value


def parse_inputs(text: str) -> List[float]:
    """Parse comma-separated input reals, e.g. ``"10.0,10.0,10.0"``.

    Raises:
        argparse.ArgumentTypeError: If the list is empty or any item is not a finite number
    """
    items = [item for item in text.split(',')]
    if not text.strip() or any(not item.strip() for item in items):
        raise argparse.ArgumentTypeError(f"expected comma-separated numbers, got '{text}'")
    return [parse_real(item) for item in items]


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(results, f, indent=2, sort_keys=True)
        else:
            json.dump(results, f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        secs = seconds % 60
        return f"{hours}h {minutes}m {secs:.1f}s"


def print_search_stats(stats: Dict[str, Any]) -> None:
    """Print search statistics block."""
    print("\nSearch Statistics:")
    print(f"Nodes expanded:   {stats.get('nodes_expanded', 0)}")
    print(f"Nodes generated:  {stats.get('nodes_generated', 0)}")
    print(f"Nodes enqueued:   {stats.get('nodes_enqueued', 0)}")
    print(f"Duplicates:       {stats.get('duplicate_states', 0)}")
    print(f"Horizon discards: {stats.get('horizon_discards', 0)}")
    print(f"Max depth:        {stats.get('max_depth_reached', 0)}")
    print(f"Branching factor: {stats.get('average_branching_factor', 0.0):.2f}")
