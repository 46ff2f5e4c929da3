#!/usr/bin/env python3
"""
Main entry point for soltree

This module serves as the CLI entry point, handling argument parsing
and routing to the appropriate command implementations in the cli/ module.
"""

import sys
import argparse

from soltree import __version__
from soltree.utils.logging import setup_logging

from .view import view_command
from .search import search_command


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all soltree commands."""
    parser = argparse.ArgumentParser(description='SolTree - call trace viewer for Ethereum test traces')
    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', help='TOML configuration file (default: ./soltree.toml if present)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--verbose', action='store_true', help='Enable trace-level logging (more than --debug)')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress log output')
    parser.add_argument('--log-file', help='Also write logs to this file')

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(dest='command', help='Commands')
    subparsers.required = True

    # view command
    view_parser = subparsers.add_parser('view', help='Render a trace file as a call tree')
    view_parser.add_argument('trace_file', help='Trace dump (.txt, .log or .trace)')
    view_parser.add_argument('--expand-all', '-a', action='store_true', help='Expand every node instead of only the top-level call stacks')
    view_parser.add_argument('--search', '-s', help='Highlight nodes containing this text and expand their ancestors')
    view_parser.add_argument('--interactive', '-i', action='store_true', help='Start interactive viewer')
    view_parser.add_argument('--json', action='store_true', help='Output the parsed tree as JSON for web app consumption')
    view_parser.add_argument('--no-color', action='store_true', help='Disable colored output')

    # search command
    search_parser = subparsers.add_parser('search', help='Find trace lines containing a query')
    search_parser.add_argument('trace_file', help='Trace dump (.txt, .log or .trace)')
    search_parser.add_argument('query', help='Case-insensitive text to search for')
    search_parser.add_argument('--json', action='store_true', help='Output matches as JSON')
    search_parser.add_argument('--no-color', action='store_true', help='Disable colored output')

    return parser


def main(argv=None):
    """Main entry point for soltree CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        quiet=args.quiet,
        debug=args.debug,
        verbose=args.verbose,
        log_file=args.log_file,
    )

    # Route commands to CLI modules
    if args.command == 'view':
        return view_command(args)
    elif args.command == 'search':
        return search_command(args)

    return 0


if __name__ == '__main__':
    sys.exit(main())
