"""
Bricklane Logging

Module-scoped loggers with per-module levels, configured from the
environment or programmatically.

Usage:
    from bricklane.logging import get_logger

    log = get_logger('breakout')
    log.debug("Brick destroyed at %s", rect)
    log.info("Level %d started", level)

Configuration:
    Environment variables:
        BRICKLANE_LOG_LEVEL=DEBUG          # Global default level
        BRICKLANE_LOG_BREAKOUT=DEBUG       # Module-specific level
        BRICKLANE_LOG_BASE_GAME=WARNING

    Or programmatically:
        from bricklane.logging import configure_logging
        configure_logging(level='DEBUG', modules={'base_game': 'INFO'})
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


ENV_PREFIX = 'BRICKLANE_LOG_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


# Global configuration
_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, falling back to INFO."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    BRICKLANE_LOG_LEVEL sets the global default; any other
    BRICKLANE_LOG_<MODULE> sets the level for that module
    (BRICKLANE_LOG_BASE_GAME=DEBUG -> base_game: DEBUG).
    """
    if 'BRICKLANE_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['BRICKLANE_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key != 'BRICKLANE_LOG_LEVEL':
            module_name = key[len(ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class BricklaneLogger:
    """
    Logger for a specific module.

    Messages below the module's effective level are dropped before
    formatting, so debug calls in the tick loop cost a comparison.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """
        Log an error followed by the current exception's traceback.

        Args:
            msg: Message describing what failed
        """
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        tb = traceback.format_exc()
        if tb and tb.strip() != 'NoneType: None':
            for line in tb.strip().split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BricklaneLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'breakout', 'base_game')

    Returns:
        BricklaneLogger instance for the module
    """
    return BricklaneLogger(module)


def enable_all_logging() -> None:
    """Enable DEBUG level for all modules."""
    configure_logging(level='DEBUG')


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
