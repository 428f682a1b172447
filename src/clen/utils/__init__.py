"""Utility functions for CLEN."""

from clen.utils.length import (
    encode_text,
    measure_file_content_length,
    measure_text_length,
    naive_text_length,
)
from clen.utils.paths import probe, probe_exists

__all__ = [
    "encode_text",
    "measure_text_length",
    "naive_text_length",
    "measure_file_content_length",
    "probe",
    "probe_exists",
]
