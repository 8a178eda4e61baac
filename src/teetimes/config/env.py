"""Environment variable handling for configuration."""

import os
from typing import Any


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'TEETIMES_LOGIN': ('credentials', 'login'),
        'TEETIMES_PASSWD': ('credentials', 'passwd'),
        'TEETIMES_COLUMNS': ('defaults', 'columns'),
        'TEETIMES_DATE': ('defaults', 'date'),
        'TEETIMES_COURSE': ('defaults', 'course'),
        'TEETIMES_CACHE': ('defaults', 'cache'),
        'TEETIMES_DISPLAY': ('defaults', 'display'),
        'TEETIMES_SESSION_FORMAT': ('site', 'session_format'),
        'TEETIMES_FAILURE_MARKER': ('site', 'failure_marker'),
        'TEETIMES_LOG_FILE': ('logging', 'file'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def set_nested_value(config: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def get_env_config(cls) -> dict[str, Any]:
        """Get the configuration values present in the environment."""
        config: dict[str, Any] = {}
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls.set_nested_value(config, path, value)
        return config
