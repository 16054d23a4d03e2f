"""Main CLI entry point for the split/combine solver."""

import re
import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging, parse_inputs, parse_real

# "-6,2" or "-.5" look like options to argparse unless they follow "--"
NEGATIVE_NUMBER = re.compile(r"^-\.?\d")


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='split-solver',
        description='Split/combine solver - find split and combine operations that bring a value close to a target',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  split-solver solve "10.0,10.0,10.0" 12.0 1.0   # Search with default horizon
  split-solver solve 60 20 0.5 --max-depth 3     # Shallower search
  split-solver solve "-6,2" -2 0.5               # Negative inputs
  split-solver config show                       # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override (e.g., search.max_depth=4); may be repeated'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Search for a split/combine path to the target',
        description='Search for split/combine operations bringing a value within margin of target'
    )

    solve_parser.add_argument(
        'inputs',
        type=parse_inputs,
        help='Comma-separated input values (e.g., "10.0,10.0,10.0")'
    )

    solve_parser.add_argument(
        'target',
        type=parse_real,
        help='Target value'
    )

    solve_parser.add_argument(
        'margin',
        type=parse_real,
        help='Maximum allowed absolute deviation from target'
    )

    solve_parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help='Maximum number of operations (default: from configuration, 6)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Manage solver configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def protect_negative_inputs(argv: List[str]) -> List[str]:
    """Keep negative 'solve' positionals from being read as options.

    When an argument after 'solve' starts with a minus sign followed by a
    number, the solve options are moved ahead of a '--' separator and the
    remaining arguments are passed through as positionals.
    """
    if 'solve' not in argv or '--' in argv:
        return argv

    start = argv.index('solve') + 1
    tail = argv[start:]
    if not any(NEGATIVE_NUMBER.match(arg) for arg in tail):
        return argv

    options, positionals = [], []
    remaining = iter(tail)
    for arg in remaining:
        if arg == '--max-depth':
            options.append(arg)
            value = next(remaining, None)
            if value is not None:
                options.append(value)
        elif arg.startswith('--max-depth=') or arg in ('-h', '--help'):
            options.append(arg)
        else:
            positionals.append(arg)

    return argv[:start] + options + ['--'] + positionals


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args is None:
        args = sys.argv[1:]

    parser = create_parser()
    parsed_args = parser.parse_args(protect_negative_inputs(list(args)))

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
