"""
Logging for soltree.

Everything logs under the ``soltree`` logger tree: parsers report section
and node counts at DEBUG, dropped lines at TRACE, and the session reports
load results at INFO and load failures at ERROR. The CLI calls
``setup_logging`` once; library users can attach their own handlers instead.
"""

import logging
import sys
from typing import Optional

from soltree.utils.colors import Colors

LOGGER_NAME = 'soltree'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Below DEBUG: one record per dropped trace line
TRACE = 5
logging.addLevelName(TRACE, 'TRACE')


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        TRACE: Colors.DIM,
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.BRIGHT_CYAN,
        logging.WARNING: Colors.BRIGHT_YELLOW,
        logging.ERROR: Colors.BRIGHT_RED,
        logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
    }

    def __init__(self, fmt: str = None, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if not color:
            return super().format(record)

        # The same record reaches the file handler uncolored.
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{Colors.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class SoltreeLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


logging.setLoggerClass(SoltreeLogger)


def _resolve_level(level: int, debug: bool, verbose: bool) -> int:
    if verbose:
        return TRACE
    if debug:
        return logging.DEBUG
    return level


def _console_handler(level: int, use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    is_tty = hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()
    handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, use_colors=use_colors and is_tty))
    return handler


def _file_handler(path: str) -> logging.Handler:
    handler = logging.FileHandler(path)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    level: int = logging.WARNING,
    quiet: bool = False,
    debug: bool = False,
    verbose: bool = False,
    log_file: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Install soltree's handlers, replacing any from an earlier call.

    Args:
        level: Console level when neither debug nor verbose is set
        quiet: Install no console handler
        debug: Show DEBUG records (section and node counts)
        verbose: Show TRACE records (every dropped trace line)
        log_file: Also write DEBUG and above to this file
        use_colors: Color level names when stderr is a terminal

    Returns:
        The ``soltree`` logger
    """
    console_level = _resolve_level(level, debug, verbose)

    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    root.propagate = False
    root.setLevel(min(console_level, logging.DEBUG) if log_file else console_level)

    if not quiet:
        root.addHandler(_console_handler(console_level, use_colors))
    if log_file:
        root.addHandler(_file_handler(log_file))

    return root


def get_logger(name: str = None) -> logging.Logger:
    """Return ``soltree.<name>``, or the ``soltree`` logger itself when name is empty."""
    if name:
        return logging.getLogger(f'{LOGGER_NAME}.{name}')
    return logging.getLogger(LOGGER_NAME)


logger = get_logger()


def log_trace(log: logging.Logger, msg: str, *args, **kwargs):
    """Log at TRACE on any logger, including ones created before SoltreeLogger was installed."""
    if hasattr(log, 'trace'):
        log.trace(msg, *args, **kwargs)
    else:
        log.log(TRACE, msg, *args, **kwargs)
