"""
Trace document loader.

Reads a dump file in one piece and decodes it to text. There is no streaming:
parsing starts only once the whole document is available.
"""

import codecs
from pathlib import Path
from typing import Optional, Union

from soltree.config import ViewerConfig
from soltree.utils.exceptions import DocumentReadError
from soltree.utils.logging import get_logger

logger = get_logger('loader')


def decode_document(data: bytes, path: Optional[str] = None) -> str:
    """Decode document bytes as UTF-8, dropping a leading byte order mark."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"Cannot decode trace file as UTF-8: {e}", path=path)


def read_document(path: Union[str, Path], config: Optional[ViewerConfig] = None) -> str:
    """
    Read a whole trace document.

    Args:
        path: Path of the dump file
        config: Viewer configuration (for the advisory extension check)

    Returns:
        Document text

    Raises:
        DocumentReadError: If the file cannot be read or decoded
    """
    config = config or ViewerConfig()
    file_path = Path(path)

    if not config.is_accepted_file(str(file_path)):
        logger.warning(
            f"{file_path.name} does not have a trace file extension "
            f"({', '.join(config.accepted_extensions)}); parsing anyway"
        )

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise DocumentReadError(f"Cannot read trace file {file_path}: {e}", path=str(file_path))

    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return decode_document(data, str(file_path))
