import os

import pytest

from clen import Analyzer, ClassificationConfig, ResultRecord, analyze, analyze_all


def test_literal_text_all_counts(full_config):
    record = analyze("Hello World 42!", full_config)
    assert record.item == "Hello World 42!"
    assert record.length == 15
    assert record.is_file is False
    assert record.from_file_content is False
    assert record.counts == {
        "letters": 10,
        "uppercase": 2,
        "lowercase": 8,
        "numbers": 2,
        "sentences": 1,
        "special_signs": 1,
        "words": 3,
        "bytes": 15,
        "quotes": 0,
    }


def test_counts_follow_report_order(full_config):
    record = analyze("x", full_config)
    assert list(record.counts) == [
        "letters",
        "uppercase",
        "lowercase",
        "numbers",
        "sentences",
        "special_signs",
        "words",
        "bytes",
        "quotes",
    ]


def test_only_enabled_counts_are_reported():
    record = analyze("one two", ClassificationConfig(words=True))
    assert record.counts == {"words": 2}

    record = analyze("one two", ClassificationConfig())
    assert record.counts == {}
    assert record.length == 7


def test_cases_without_letters_is_a_no_op():
    record = analyze("ABcd", ClassificationConfig(cases=True, numbers=True))
    assert record.counts == {"numbers": 0}


def test_file_content_mode(sample_file, sample_text, file_config):
    record = analyze(str(sample_file), file_config)
    assert record.is_file is True
    assert record.from_file_content is True
    assert record.length == len(sample_text)
    assert record.counts == {
        "letters": 23,
        "uppercase": 3,
        "lowercase": 20,
        "numbers": 3,
        "sentences": 3,
        "special_signs": 5,
        "words": 4,
        "bytes": len(sample_text),
        "quotes": 1,
    }


def test_existing_path_without_file_content_is_literal(sample_file, full_config):
    path = str(sample_file)
    record = analyze(path, full_config)
    assert record.is_file is True
    assert record.from_file_content is False
    assert record.length == len(os.fsencode(path))
    assert record.counts["bytes"] == record.length


def test_missing_path_in_file_content_mode_is_literal(tmp_path):
    path = str(tmp_path / "missing.txt")
    record = analyze(path, ClassificationConfig(file_content=True, bytes=True))
    assert record.is_file is False
    assert record.from_file_content is False
    assert record.length == len(os.fsencode(path))


def test_unreadable_file_in_file_content_mode(tmp_path):
    # A directory exists but its contents cannot be read as a file
    record = analyze(str(tmp_path), ClassificationConfig(file_content=True, letters=True))
    assert record.is_file is True
    assert record.from_file_content is True
    assert record.length == 0
    assert record.counts == {"letters": 0}


def test_file_with_nul_bytes_uses_true_size(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"ab\x00cd")
    record = analyze(str(path), ClassificationConfig(file_content=True, bytes=True))
    assert record.length == 5
    assert record.counts == {"bytes": 5}


def test_non_ascii_length_is_in_bytes():
    record = analyze("héllo", ClassificationConfig(letters=True))
    assert record.length == 6
    assert record.counts == {"letters": 4}


def test_analyze_is_idempotent(sample_file, file_config):
    first = analyze(str(sample_file), file_config)
    second = analyze(str(sample_file), file_config)
    assert first == second


def test_analyze_all_preserves_order(full_config):
    items = [f"item {i}" * i for i in range(1, 20)]
    sequential = analyze_all(items, full_config)
    threaded = analyze_all(items, full_config, jobs=4)
    assert [r.item for r in sequential] == items
    assert sequential == threaded


def test_analyzer_word_size_does_not_change_results(full_config):
    text = "The quick brown fox. Jumps?"
    results = [Analyzer(full_config, word_size=size).analyze(text) for size in (4, 8, 3)]
    assert results[0] == results[1] == results[2]


def test_lone_surrogate_text_does_not_raise():
    record = analyze("ab\ud800", ClassificationConfig(letters=True, bytes=True))
    assert record.is_file is False
    assert record.length == 5
    assert record.counts == {"letters": 2, "bytes": 5}


def test_record_counts_are_read_only(full_config):
    record = analyze("abc", full_config)
    with pytest.raises(TypeError):
        record.counts["letters"] = 99
    assert record.counts["letters"] == 3
    assert hash(record) == hash(analyze("abc", full_config))


def test_record_copies_counts_argument():
    counts = {"words": 1}
    record = ResultRecord(
        item="a", length=1, is_file=False, from_file_content=False, counts=counts
    )
    counts["words"] = 5
    assert record.counts == {"words": 1}
    assert record.to_dict()["counts"] == {"words": 1}
