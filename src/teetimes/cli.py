"""
Command line interface for the tee times application.
"""

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from teetimes.api.ikga import IkgaAPI
from teetimes.config.logging import setup_logging
from teetimes.config.settings import DEFAULT_COLUMNS
from teetimes.config.settings import DEFAULT_DATE
from teetimes.config.settings import DISPLAY_CHOICES
from teetimes.config.settings import RunConfig
from teetimes.config.settings import load_run_config
from teetimes.exceptions import ArgumentError
from teetimes.exceptions import TeeTimesError
from teetimes.models.session import SessionFormat
from teetimes.services.auth_service import AuthService
from teetimes.services.schedule_service import ScheduleService
from teetimes.services.slot_formatter import create_formatter
from teetimes.utils.logging_utils import get_logger


logger = get_logger(__name__)

class TeeTimesArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting."""
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = TeeTimesArgumentParser(
        prog='teetimes',
        description='Show the available tee times of the IKGA golf courses for a day',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'Options not given on the command line are read from TEETIMES_* environment\n'
            'variables, then from the --config file.'
        )
    )
    parser.add_argument('--login', help='Your login email or surname')
    parser.add_argument('--passwd', help='The base64 encoded password')
    parser.add_argument(
        '--columns',
        type=int,
        help=f'The number of columns to show. Defaults to {DEFAULT_COLUMNS}. Must be higher than 0'
    )
    parser.add_argument('--date', help=f'The date to check (default: {DEFAULT_DATE})')
    parser.add_argument(
        '--display',
        choices=DISPLAY_CHOICES,
        help='Output as CSV records or as a table per course (default: csv)'
    )
    parser.add_argument(
        '--course',
        help=(
            'The golf course identifier for the first selected golf course. '
            'The default is the first golf course loaded in the browser. '
            'If given it must match the value in the select box of the site'
        )
    )
    parser.add_argument(
        '--cache',
        help=(
            'Cache file location where to load and store session data. '
            'The file need not exist, but if it does it needs to contain valid session data. '
            'Session data will be written to it'
        )
    )
    parser.add_argument(
        '--session-format',
        choices=[session_format.value for session_format in SessionFormat],
        help='How the session is stored in the cache file (default: id_pair)'
    )
    parser.add_argument('--config', help='YAML file with default settings')
    parser.add_argument('--log-file', help='Write debug logging to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show the fetched schedule URL and progress')
    return parser

def show_help(parser: argparse.ArgumentParser, error: BaseException, stream: TextIO | None = None) -> None:
    """Print usage followed by the error description."""
    stream = stream or sys.stderr
    parser.print_help(stream)
    message = str(error)
    if message:
        stream.write(f"\n{type(error).__name__}: {message}\n")

def run(config: RunConfig, stream: TextIO | None = None) -> int:
    """Print the available tee times for a run configuration."""
    stream = stream or sys.stdout

    with IkgaAPI() as api:
        auth_service = AuthService(api, config.session_format, config.failure_marker)
        schedule_service = ScheduleService(api, auth_service)

        valid_session = schedule_service.get_valid_session(config)
        formatter = create_formatter(config.display, stream)
        for slot in schedule_service.iter_slots(valid_session.document, config.columns):
            formatter.write(slot)

    return 0

def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
        config, settings = load_run_config(args)
        setup_logging(verbose=config.verbose, log_file=settings['logging'].get('file'))
        return run(config)

    except TeeTimesError as e:
        logger.debug(f"{type(e).__name__}: {e}", exc_info=True)
        show_help(parser, e)
        return e.exit_code

    except Exception as e:
        logger.exception("Unhandled exception")
        show_help(parser, e)
        return 1

if __name__ == '__main__':
    sys.exit(main())
