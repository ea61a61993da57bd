"""Main CLI entry point for go2rpm."""

import argparse
import sys
from typing import Optional

from .commands import run_generate
from .manual import MANUAL, SYNOPSIS


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the go2rpm CLI."""
    parser = argparse.ArgumentParser(
        prog='go2rpm',
        usage=SYNOPSIS,
        description='Create RPM packages from Go packages',
        epilog='Run go2rpm --man for the full manual.',
    )

    parser.add_argument(
        'package',
        nargs='?',
        help='Import path of the Go package to generate RPM for'
    )
    parser.add_argument(
        '--pkg',
        type=str,
        metavar='PACKAGE',
        help='Import path of the Go package (overrides the positional argument)'
    )
    parser.add_argument(
        '--spec',
        type=str,
        metavar='FILENAME',
        help='Save the generated RPM SPEC file into given file (default: standard output)'
    )
    parser.add_argument(
        '--srpm',
        action='store_true',
        help='Fetch the distribution file and build a source RPM package'
    )
    parser.add_argument(
        '--workspace',
        type=str,
        metavar='DIRECTORY',
        help='Directory for SCM checkouts (default: a temporary directory)'
    )
    parser.add_argument(
        '-m', '--man',
        action='store_true',
        help='Print the manual page and exit'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.man:
        print(MANUAL)
        return 0

    if not parsed_args.pkg:
        parsed_args.pkg = parsed_args.package
    if not parsed_args.pkg:
        parser.print_usage(sys.stderr)
        print('go2rpm: error: Package name not specified', file=sys.stderr)
        return 2

    return run_generate(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
