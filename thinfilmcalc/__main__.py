"""
Thin Film Calculator: Command-line Entry Point
==============================================

Start an interactive session with:

    python -m thinfilmcalc [--library FILE] [--log FILE] [--verbose] [--debug-log FILE]

Options:
    --library     Material library file (default: films.txt)
    --log         Measurement log file (default: data.txt)
    --verbose     Report library activity on standard error
    --debug-log   Write a debug log of the session to FILE

With no options the calculator reads films.txt and appends measurements to
data.txt in the working directory.
"""

import argparse
import logging
import sys

from thinfilmcalc.config import DEFAULT_LIBRARY_PATH, DEFAULT_LOG_PATH, Settings
from thinfilmcalc.errors import LibraryError
from thinfilmcalc.library import FilmLibrary
from thinfilmcalc.logging_config import setup_logging
from thinfilmcalc.session import CalculatorSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='thinfilmcalc',
        description='Thin film thickness from interference fringe counts',
    )
    parser.add_argument(
        '--library', default=None,
        help=f'Material library file (default: {DEFAULT_LIBRARY_PATH})',
    )
    parser.add_argument(
        '--log', default=None,
        help=f'Measurement log file (default: {DEFAULT_LOG_PATH})',
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Report library activity on standard error',
    )
    parser.add_argument(
        '--debug-log', default=None, metavar='FILE',
        help='Write a debug log of the session to FILE',
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if args.debug_log:
        level = logging.DEBUG
    settings = Settings().with_overrides(
        library_path=args.library,
        log_path=args.log,
        log_level=level,
        debug_log=args.debug_log,
    )
    setup_logging(
        level=settings.log_level,
        log_file=str(settings.debug_log) if settings.debug_log else None,
    )

    try:
        library = FilmLibrary.load(settings.library_path)
        session = CalculatorSession(library, settings)
        return session.run()
    except LibraryError as e:
        print(e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
