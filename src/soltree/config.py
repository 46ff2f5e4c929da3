"""
Viewer configuration.

All tunables that the parser and renderer need are carried by an explicit
ViewerConfig value instead of module-level tables. Values come from the
dataclass defaults, then an optional TOML file (``[soltree]`` table), then
``SOLTREE_*`` environment variables.
"""

import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from soltree.utils.colors import Colors, SUPPORTS_COLOR
from soltree.utils.exceptions import ConfigError
from soltree.utils.logging import get_logger

logger = get_logger('config')

DEFAULT_CONFIG_FILE = 'soltree.toml'

SECTION_MARKER = r'Traces:\s*'
ACCEPTED_EXTENSIONS = ('.txt', '.log', '.trace')

# Marker colors per call depth; the two palettes alternate by row.
DEPTH_COLORS = (
    Colors.WHITE,
    Colors.BLUE,
    Colors.GREEN,
    Colors.MAGENTA,
    Colors.YELLOW,
    Colors.RED,
    Colors.CYAN,
    Colors.BRIGHT_RED,
    Colors.BRIGHT_YELLOW,
    Colors.BRIGHT_GREEN,
    Colors.BRIGHT_CYAN,
)
DEPTH_COLORS_ALT = (
    Colors.GRAY,
    Colors.BRIGHT_BLUE,
    Colors.BRIGHT_GREEN,
    Colors.BRIGHT_MAGENTA,
    Colors.BRIGHT_YELLOW,
    Colors.BRIGHT_RED,
    Colors.BRIGHT_CYAN,
    Colors.RED,
    Colors.YELLOW,
    Colors.GREEN,
    Colors.CYAN,
)
# Colors for call arguments, cycled by argument index.
ARG_COLORS = (
    Colors.MAGENTA,
    Colors.YELLOW,
    Colors.GREEN,
    Colors.BRIGHT_MAGENTA,
    Colors.BRIGHT_BLUE,
    Colors.RED,
    Colors.BRIGHT_YELLOW,
    Colors.CYAN,
    Colors.BRIGHT_CYAN,
)


@dataclass
class ViewerConfig:
    """Settings shared by the parser, session and renderer."""
    section_marker: str = SECTION_MARKER
    accepted_extensions: Tuple[str, ...] = ACCEPTED_EXTENSIONS
    depth_colors: Tuple[str, ...] = DEPTH_COLORS
    depth_colors_alt: Tuple[str, ...] = DEPTH_COLORS_ALT
    arg_colors: Tuple[str, ...] = ARG_COLORS
    indent_width: int = 2
    use_colors: bool = SUPPORTS_COLOR
    config_file: Optional[str] = field(default=None, compare=False)
    section_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.section_marker:
            raise ConfigError("section_marker cannot be empty", config_file=self.config_file)
        try:
            self.section_pattern = re.compile(self.section_marker)
        except (re.error, TypeError) as e:
            raise ConfigError(
                f"Invalid section_marker {self.section_marker!r}: {e}",
                config_file=self.config_file
            )
        if self.section_pattern.groups:
            raise ConfigError(
                f"section_marker must not contain capturing groups (got: {self.section_marker!r}); "
                "use (?:...) instead",
                config_file=self.config_file
            )
        if self.indent_width < 0:
            raise ConfigError(
                f"indent_width must be non-negative (got: {self.indent_width})",
                config_file=self.config_file
            )
        if not self.depth_colors or not self.depth_colors_alt:
            raise ConfigError("Depth color palettes cannot be empty", config_file=self.config_file)
        if not self.arg_colors:
            raise ConfigError("Argument color palette cannot be empty", config_file=self.config_file)
        self.accepted_extensions = tuple(ext.lower() for ext in self.accepted_extensions)

    def depth_color(self, depth: int, row_index: int = 0) -> str:
        """Color for a node at the given depth, alternating palettes by row."""
        palette = self.depth_colors_alt if row_index % 2 == 1 else self.depth_colors
        return palette[depth % len(palette)]

    def arg_color(self, index: int) -> str:
        return self.arg_colors[index % len(self.arg_colors)]

    def is_accepted_file(self, path: str) -> bool:
        return Path(path).suffix.lower() in self.accepted_extensions

    @classmethod
    def load(cls, path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> 'ViewerConfig':
        """
        Build a configuration from file and environment.

        Args:
            path: TOML file to read. When None, ``soltree.toml`` in the
                  current directory is used if it exists.
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ViewerConfig instance

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        config_path = path
        if config_path is None and Path(DEFAULT_CONFIG_FILE).is_file():
            config_path = DEFAULT_CONFIG_FILE

        if config_path is not None:
            values.update(_read_config_file(config_path))
            values['config_file'] = str(config_path)

        values.update(_read_environment(environ))

        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                config_file=values.get('config_file')
            )

        for key in ('accepted_extensions', 'depth_colors', 'depth_colors_alt', 'arg_colors'):
            if key in values:
                if not isinstance(values[key], (list, tuple)):
                    raise ConfigError(f"'{key}' must be a list", config_file=values.get('config_file'))
                values[key] = tuple(values[key])

        logger.debug(f"Loaded configuration: {values}")
        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}", config_file=values.get('config_file'))


def _read_config_file(path: str) -> Dict[str, Any]:
    import tomllib

    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}", config_file=str(path))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file: {e}", config_file=str(path))

    section = data.get('soltree', {})
    if not isinstance(section, dict):
        raise ConfigError("'soltree' must be a table", config_file=str(path))
    return dict(section)


def _read_environment(environ: Dict[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}

    if environ.get('SOLTREE_NO_COLOR'):
        values['use_colors'] = False

    indent = environ.get('SOLTREE_INDENT_WIDTH')
    if indent:
        try:
            values['indent_width'] = int(indent)
        except ValueError:
            raise ConfigError(f"SOLTREE_INDENT_WIDTH must be an integer (got: {indent})")

    extensions = environ.get('SOLTREE_EXTENSIONS')
    if extensions:
        values['accepted_extensions'] = [ext.strip() for ext in extensions.split(',') if ext.strip()]

    return values
