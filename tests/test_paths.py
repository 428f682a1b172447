import os

from clen.utils.paths import probe, probe_exists


def test_probe_exists(sample_file, tmp_path):
    assert probe_exists(str(sample_file)) is True
    assert probe_exists(str(tmp_path)) is True
    assert probe_exists(str(tmp_path / "nope")) is False


def test_probe_exists_rejects_unusable_names():
    assert probe_exists("") is False
    assert probe_exists("bad\x00name") is False
    assert probe_exists("x" * 100_000) is False


def test_probe_without_file_content_skips_size(sample_file):
    result = probe(str(sample_file))
    assert result.exists is True
    assert result.size == 0


def test_probe_with_file_content(sample_file):
    result = probe(str(sample_file), file_content=True)
    assert result.exists is True
    assert result.size == sample_file.stat().st_size


def test_probe_unreadable_file_reports_zero(sample_file, monkeypatch):
    def refuse(*args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr("clen.utils.length.open", refuse, raising=False)
    result = probe(str(sample_file), file_content=True)
    assert result.exists is True
    assert result.size == 0


def test_probe_missing_path(tmp_path):
    result = probe(os.path.join(tmp_path, "missing"), file_content=True)
    assert result.exists is False
    assert result.size == 0
