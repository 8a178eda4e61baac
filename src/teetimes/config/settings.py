"""Configuration settings for the tee times application."""

import argparse
import base64
import binascii
import datetime
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from teetimes.api.ikga import IkgaAPI
from teetimes.config.env import EnvConfig
from teetimes.config.utils import deep_merge
from teetimes.config.utils import resolve_path
from teetimes.exceptions import ArgumentError
from teetimes.models.session import Credentials
from teetimes.models.session import SessionFormat
from teetimes.utils.date_utils import parse_date


DISPLAY_CSV = 'csv'
DISPLAY_TABLE = 'table'
DISPLAY_CHOICES = (DISPLAY_CSV, DISPLAY_TABLE)

DEFAULT_COLUMNS = 4
DEFAULT_DATE = 'tomorrow'
DEFAULT_DISPLAY = DISPLAY_CSV
DEFAULT_SESSION_FORMAT = SessionFormat.ID_PAIR

DEFAULT_FAILURE_MARKER = IkgaAPI.LOGIN_FAILURE_MARKER

PLAYDATE_FORMAT = '%d/%m/%Y'

DEFAULT_CONFIG: dict[str, Any] = {
    'credentials': {
        'login': '',
        'passwd': '',
    },
    'defaults': {
        'columns': DEFAULT_COLUMNS,
        'date': DEFAULT_DATE,
        'course': '',
        'cache': '',
        'display': DEFAULT_DISPLAY,
    },
    'site': {
        'session_format': DEFAULT_SESSION_FORMAT.value,
        'failure_marker': DEFAULT_FAILURE_MARKER,
    },
    'logging': {
        'file': None,
    },
}

# Command line attributes and the configuration paths they override
ARGUMENT_MAPPING = {
    'login': ('credentials', 'login'),
    'passwd': ('credentials', 'passwd'),
    'columns': ('defaults', 'columns'),
    'date': ('defaults', 'date'),
    'course': ('defaults', 'course'),
    'cache': ('defaults', 'cache'),
    'display': ('defaults', 'display'),
    'session_format': ('site', 'session_format'),
    'log_file': ('logging', 'file'),
}


@dataclass(frozen=True)
class RunConfig:
    """Validated parameters for a single run."""
    login: str
    password: str
    date: datetime.date
    columns: int = DEFAULT_COLUMNS
    display: str = DEFAULT_DISPLAY
    course: str = ''
    cache: str = ''
    verbose: bool = False
    session_format: SessionFormat = DEFAULT_SESSION_FORMAT
    failure_marker: str = DEFAULT_FAILURE_MARKER

    def __post_init__(self) -> None:
        if not self.login:
            raise ArgumentError("Invalid login")
        if not self.password:
            raise ArgumentError("Invalid password")
        if self.columns < 1:
            raise ArgumentError(f"Invalid number of columns: {self.columns}.")
        if self.display not in DISPLAY_CHOICES:
            raise ArgumentError(f"Display not supported: '{self.display}'")
        if not self.failure_marker:
            raise ArgumentError("Invalid login failure marker")

    @property
    def credentials(self) -> Credentials:
        """Login name and password as one value."""
        return Credentials(login=self.login, password=self.password)

    @property
    def playdate(self) -> str:
        """Date in the format expected by the schedule page."""
        return self.date.strftime(PLAYDATE_FORMAT)

    @property
    def post_data(self) -> str:
        """Form body selecting the date and optional course on the schedule page."""
        post_data = f"playdate={self.playdate}"
        if self.course:
            post_data += f"&_comnr1={self.course}"
        return post_data


def decode_password(encoded: str) -> str:
    """Decode the base64 encoded password given on the command line."""
    try:
        return base64.b64decode(encoded, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ArgumentError("Could not parse password") from e

def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load configuration overrides from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Configuration dictionary, empty when the file is empty

    Raises:
        ArgumentError: If the file cannot be read or is not a mapping
    """
    config_file = resolve_path(path)
    try:
        with open(config_file, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except OSError as e:
        raise ArgumentError(f"Could not read config file '{config_file}': {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ArgumentError(f"Invalid YAML in config file '{config_file}'") from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ArgumentError(f"Config file '{config_file}' must contain a mapping")
    return loaded

def merge_config(args: argparse.Namespace, file_config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Merge configuration sources.

    Precedence: command line, environment, config file, built-in defaults.
    """
    config = deep_merge(DEFAULT_CONFIG, file_config or {})
    config = deep_merge(config, EnvConfig.get_env_config())

    overrides: dict[str, Any] = {}
    for attribute, path in ARGUMENT_MAPPING.items():
        value = getattr(args, attribute, None)
        if value is not None:
            EnvConfig.set_nested_value(overrides, path, value)

    return deep_merge(config, overrides)

def _parse_columns(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ArgumentError(f"Invalid number of columns: {value}.") from e

def _parse_session_format(value: Any) -> SessionFormat:
    try:
        return SessionFormat(str(value))
    except ValueError as e:
        raise ArgumentError(f"Session format not supported: '{value}'") from e

def build_run_config(config: dict[str, Any], verbose: bool = False) -> RunConfig:
    """Create a validated run configuration from merged settings."""
    credentials = config.get('credentials') or {}
    defaults = config.get('defaults') or {}
    site = config.get('site') or {}

    if not credentials.get('login'):
        raise ArgumentError("Invalid login")
    if not credentials.get('passwd'):
        raise ArgumentError("Invalid password")

    date_string = str(defaults.get('date') or '')
    try:
        play_date = parse_date(date_string)
    except ValueError as e:
        raise ArgumentError(f"Could not parse date '{date_string}'") from e

    cache = str(defaults.get('cache') or '')
    if cache:
        cache = str(resolve_path(cache))

    return RunConfig(
        login=str(credentials['login']),
        password=decode_password(str(credentials['passwd'])),
        date=play_date,
        columns=_parse_columns(defaults.get('columns')),
        display=str(defaults.get('display')),
        course=str(defaults.get('course') or ''),
        cache=cache,
        verbose=verbose,
        session_format=_parse_session_format(site.get('session_format')),
        failure_marker=str(site.get('failure_marker') or ''),
    )

def load_run_config(args: argparse.Namespace) -> tuple[RunConfig, dict[str, Any]]:
    """Load the run configuration for parsed command line arguments.

    Returns:
        The run configuration and the merged settings it was built from
    """
    file_config = load_config_file(args.config) if getattr(args, 'config', None) else None
    config = merge_config(args, file_config)
    return build_run_config(config, verbose=bool(getattr(args, 'verbose', False))), config
