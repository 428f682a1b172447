import pytest

from clen.utils.length import (
    measure_file_content_length,
    measure_text_length,
    naive_text_length,
    read_file_content,
)


def test_naive_text_length():
    assert naive_text_length(b"") == 0
    assert naive_text_length(b"abc") == 3
    assert naive_text_length(b"ab\x00cd") == 2
    assert naive_text_length(b"\x00") == 0


@pytest.mark.parametrize("word_size", [4, 8, 3, 16])
def test_measure_matches_naive_for_every_terminator_offset(word_size):
    # Offsets around several word boundaries, plus no terminator at all
    for size in range(0, 40):
        base = bytes(range(1, size + 1))
        assert measure_text_length(base, word_size) == naive_text_length(base)
        for offset in range(size):
            data = base[:offset] + b"\x00" + base[offset + 1 :]
            assert measure_text_length(data, word_size) == offset


@pytest.mark.parametrize("word_size", [4, 8])
def test_measure_with_unaligned_views(word_size):
    # Slicing a bytearray through memoryview shifts the start address
    raw = bytearray(b"x" * 64)
    raw[50] = 0
    view = memoryview(raw)
    for start in range(word_size):
        assert measure_text_length(view[start:], word_size) == 50 - start


def test_measure_high_bytes_are_not_terminators():
    # 0x80 and 0x81 trip naive "high bit" checks but are not zero
    data = bytes([0x80, 0x81, 0xFF, 0x01] * 8) + b"\x00tail"
    assert measure_text_length(data) == 32


def test_measure_long_text():
    data = b"a" * 10_000 + b"\x00" + b"b" * 100
    assert measure_text_length(data) == 10_000
    assert measure_text_length(b"a" * 10_001) == 10_001


def test_measure_file_content_length(sample_file):
    assert measure_file_content_length(sample_file) == sample_file.stat().st_size


def test_measure_file_content_length_counts_nul_bytes(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01\x00\x02")
    assert measure_file_content_length(path) == 4


def test_unopenable_file_reports_zero(tmp_path):
    assert measure_file_content_length(tmp_path / "missing.txt") == 0
    # Directories exist but cannot be opened as files
    assert measure_file_content_length(tmp_path) == 0
    assert read_file_content(tmp_path) == b""


def test_empty_file_reports_zero(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert measure_file_content_length(path) == 0
