#!/usr/bin/env python
"""
MyShell Command Line Interface

Entry point for the `myshell` console script.
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from . import __version__
from .config import load_config
from .exceptions import ConfigError

logger = logging.getLogger('MyShell.cli')

def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='myshell',
        description='MyShell - interactive shell for everyday Linux administration'
    )

    parser.add_argument(
        '-c', '--command',
        help='Execute a single command and exit',
        type=str
    )

    parser.add_argument(
        '--config',
        help='Path to a YAML config file',
        type=str
    )

    parser.add_argument(
        '--log-file',
        help='Append action log entries to this file',
        type=str
    )

    parser.add_argument(
        '-d', '--debug',
        help='Enable debug logging',
        action='store_true'
    )

    parser.add_argument(
        '-v', '--version',
        help='Show version and exit',
        action='store_true'
    )

    return parser.parse_args(args)

def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the MyShell CLI"""
    parsed_args = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if parsed_args.version:
        print(f"MyShell version {__version__}")
        return 0

    try:
        config = load_config(parsed_args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed_args.log_file:
        config.log_file = os.path.expanduser(parsed_args.log_file)

    from .shell import MyShell, Outcome
    shell = MyShell(config)

    if parsed_args.command:
        outcome = shell.run_command(parsed_args.command)
        return 0 if outcome in (Outcome.SUCCESS, Outcome.EXIT) else 1

    shell.cmdloop()
    return 0

if __name__ == '__main__':
    sys.exit(main())
