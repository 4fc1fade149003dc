"""Command-line interface to CanvaStyle."""

import argparse
import logging
import math
import sys
from collections.abc import Mapping

from . import (
    LOGGER, __version__, parse_filter, parse_font, parse_size, parse_variant)
from .properties import INITIAL_VALUES, DropShadow, FontFeatures
from .units import serialize_number

PARSERS = {
    'font': parse_font,
    'variant': parse_variant,
    'filter': parse_filter,
}

PARSER = argparse.ArgumentParser(
    prog='canvastyle',
    description='Parse CSS font, font-variant and filter shorthands.')
PARSER.add_argument(
    'kind', choices=(*PARSERS, 'size'), help='kind of value to parse')
PARSER.add_argument('value', help='CSS value, quoted as a single argument')
PARSER.add_argument(
    '-b', '--base-size', type=float, default=INITIAL_VALUES['font_size'],
    help='base size in pixels for relative sizes, defaults to 16')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'CanvaStyle version {__version__}',
    help='print CanvaStyle’s version number and exit')


def format_value(value):
    """Get a human-readable string for a parsed field."""
    if isinstance(value, FontFeatures):
        parts = []
        if value.on:
            parts.append(f'on={",".join(value.on)}')
        if value.off:
            parts.append(f'off={",".join(value.off)}')
        parts.extend(f'{tag}={number}' for tag, number in value.settings)
        return ' '.join(parts) or 'none'
    elif isinstance(value, DropShadow):
        lengths = ' '.join(serialize_number(length) for length in value[:3])
        return f'{lengths} {value.color}'
    elif isinstance(value, tuple):
        return ', '.join(value)
    elif isinstance(value, Mapping):
        return ' '.join(
            f'{name}={format_value(item)}' for name, item in value.items())
    elif isinstance(value, (int, float)):
        return serialize_number(value)
    return str(value)


def main(argv=None, stdout=None):
    """The ``canvastyle`` program takes two arguments:

    .. code-block:: sh

        canvastyle [options] <kind> <value>

    Print the parsed fields, one per line. Return 1 when the value is
    invalid.

    """
    args = PARSER.parse_args(argv)
    stdout = stdout or sys.stdout

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(
                logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    try:
        if args.kind == 'size':
            size = parse_size(args.value, args.base_size)
            if math.isnan(size):
                return 1
            print(serialize_number(size), file=stdout)  # noqa: T201
            return 0

        result = PARSERS[args.kind](args.value)
        if result is None:
            return 1
        for name, value in result._asdict().items():
            print(f'{name}: {format_value(value)}', file=stdout)  # noqa: T201
        return 0
    finally:
        if not args.quiet:
            LOGGER.removeHandler(handler)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
