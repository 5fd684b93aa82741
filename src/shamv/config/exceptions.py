"""Custom exceptions for configuration management."""

from shamv.errors import ExitCode, ShamvError


class ConfigError(ShamvError):
    """Raised when configuration data cannot be processed."""

    exit_code = ExitCode.CONFIG_ERROR
