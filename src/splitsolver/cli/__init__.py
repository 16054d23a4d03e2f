"""Command-line interface for the split/combine solver."""

from .main import main_cli
from .commands import solve_command, config_command
from .utils import setup_logging, save_results

__all__ = [
    'main_cli',
    'solve_command',
    'config_command',
    'setup_logging',
    'save_results'
]
