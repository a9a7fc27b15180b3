"""Binary content detection.

The check is a heuristic: only the first chunk of a file is read, and the
file counts as binary when that chunk holds a NUL byte. UTF-16 text is
therefore reported as binary, and binary formats with no NUL early on are
reported as text.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SNIFF_BYTES = 64 * 1024


def is_binary(path: Path, sniff_bytes: int = DEFAULT_SNIFF_BYTES) -> bool:
    """Decide whether a file should be treated as binary.

    Fails closed: any error while reading counts as binary, so content is
    never rendered for a file we could not inspect.

    Args:
        path: Absolute path of the file
        sniff_bytes: Size of the first chunk to inspect

    Returns:
        True if the first chunk contains a NUL byte or could not be read
    """
    try:
        with open(path, "rb") as f:
            chunk = f.read(sniff_bytes)
    except OSError as e:
        logger.debug(f"Treating {path} as binary, sniff failed: {e}")
        return True

    return b"\x00" in chunk
