"""Length measurement for text buffers and file contents."""

import logging
import os
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_WORD_SIZE = 8

# Word widths with a native unsigned numpy type
_WORD_DTYPES = {
    4: np.dtype("<u4"),
    8: np.dtype("<u8"),
}


def _repeat_byte(value: int, word_size: int) -> int:
    """Build a word with every byte set to value (e.g. 0x0101...01)."""
    return int.from_bytes(bytes([value]) * word_size, "little")


def encode_text(text: str) -> bytes:
    """Encode argument text to the bytes the OS would see.

    Lone surrogates that ``os.fsencode`` rejects are passed through as-is.
    """
    try:
        return os.fsencode(text)
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def naive_text_length(data: bytes) -> int:
    """Count bytes before the first NUL with a plain forward scan."""
    for index, byte in enumerate(data):
        if byte == 0:
            return index
    return len(data)


def measure_text_length(data: bytes, word_size: int = DEFAULT_WORD_SIZE) -> int:
    """Count bytes before the first NUL, testing a machine word at a time.

    Leading bytes are scanned one at a time until the buffer address is
    aligned to ``word_size``. The aligned body is then viewed as unsigned
    words and each word is tested for a zero byte with
    ``(word - 0x01..01) & ~word & 0x80..80``. Only the first word that
    tests positive, and the trailing partial word, are scanned byte-wise.

    Args:
        data: Buffer to measure
        word_size: Word width in bytes; widths without a native type fall
            back to the byte-wise scan

    Returns:
        Same value as ``naive_text_length(data)``
    """
    dtype = _WORD_DTYPES.get(word_size)
    if dtype is None or not data:
        return naive_text_length(data)

    buffer = np.frombuffer(data, dtype=np.uint8)
    total = buffer.size

    address = buffer.__array_interface__["data"][0]
    head = min(-address % word_size, total)
    for offset in range(head):
        if buffer[offset] == 0:
            return offset

    body_words = (total - head) // word_size
    if body_words:
        body_end = head + body_words * word_size
        words = buffer[head:body_end].view(dtype)
        ones = dtype.type(_repeat_byte(0x01, word_size))
        highs = dtype.type(_repeat_byte(0x80, word_size))

        hits = np.flatnonzero((words - ones) & ~words & highs)
        if hits.size:
            start = head + int(hits[0]) * word_size
            return start + naive_text_length(data[start : start + word_size])
    else:
        body_end = head

    return body_end + naive_text_length(data[body_end:])


def measure_file_content_length(path: str | Path) -> int:
    """Return the byte size of a file's contents.

    An unopenable file reports 0, the same as an empty one.
    """
    try:
        with open(path, "rb") as f:
            return f.seek(0, 2)
    except OSError as e:
        logger.debug(f"Cannot open {path}, reporting length 0: {e}")
        return 0


def read_file_content(path: str | Path) -> bytes:
    """Read a file's contents for classification (empty if unreadable)."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        logger.debug(f"Cannot read {path}, classifying empty content: {e}")
        return b""
