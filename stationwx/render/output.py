# stationwx/render/output.py
"""
Banner storage.

Writes the rendered banner as UTF-8 text. Path "-" writes to stdout.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from ..logging import get_logger

logger = get_logger(__name__)

STDOUT_PATH = "-"


def write_banner(content: str, path: str, stdout: Optional[TextIO] = None) -> Optional[Path]:
    """
    Write a rendered banner.

    Args:
        content: Rendered banner
        path: Destination file, or "-" for stdout
        stdout: Stream used for "-" (defaults to sys.stdout)

    Returns:
        Resolved file path, or None when written to stdout

    Raises:
        OSError: If the file cannot be written
    """
    if path == STDOUT_PATH:
        stream = stdout or sys.stdout
        stream.write(content)
        if not content.endswith("\n"):
            stream.write("\n")
        logger.info("banner_written", path=STDOUT_PATH, bytes=len(content.encode("utf-8")))
        return None

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    resolved = target.resolve()
    logger.info("banner_written", path=str(resolved), bytes=len(content.encode("utf-8")))
    return resolved
