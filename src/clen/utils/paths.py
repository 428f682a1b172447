"""File-vs-literal detection for input arguments."""

import os

from clen.models import FileProbe
from clen.utils.length import measure_file_content_length


def probe_exists(text: str) -> bool:
    """Check if text names an existing filesystem entry.

    Empty text and names the OS rejects outright (embedded NUL, too long)
    are reported as not existing.
    """
    if not text:
        return False
    try:
        return os.access(text, os.F_OK)
    except (ValueError, OSError):
        return False


def probe(text: str, file_content: bool = False) -> FileProbe:
    """Probe a path and, in file-content mode, measure its contents.

    Args:
        text: Argument text interpreted as a path
        file_content: Whether the caller wants file contents measured

    Returns:
        FileProbe with size 0 unless the path exists and file_content is set
    """
    exists = probe_exists(text)
    size = measure_file_content_length(text) if exists and file_content else 0
    return FileProbe(path=text, exists=exists, size=size)
