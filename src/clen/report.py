"""Text and JSON rendering of analysis results."""

import json
from typing import Sequence

from clen.models import ResultRecord
from clen.utils.length import encode_text

HEADER = "© 2025 CLEN - By Ibrahim Yousef Alshaibani"
PREVIEW_LENGTH = 8

# Count key -> (label, indent)
COUNT_LABELS = {
    "letters": ("Letters", 4),
    "uppercase": ("Uppercase", 8),
    "lowercase": ("Lowercase", 8),
    "numbers": ("Numbers", 4),
    "sentences": ("Sentences", 4),
    "special_signs": ("Special Signs", 4),
    "words": ("Words", 4),
    "bytes": ("Bytes", 4),
    "quotes": ("Quotes", 4),
}


def preview(item: str, limit: int = PREVIEW_LENGTH) -> str:
    """Shorten an item to its first bytes plus '...'.

    A multi-byte character cut at the limit shows as U+FFFD.
    """
    data = encode_text(item)
    if len(data) > limit:
        return data[:limit].decode("utf-8", errors="replace") + "..."
    return item


def arguments_line(count: int) -> str:
    if count == 1:
        return "1 Argument given"
    return f"{count} Arguments given"


def render_record(index: int, record: ResultRecord, elapsed: float) -> list[str]:
    """Render one record as indented report lines.

    Args:
        index: 1-based position of the item
        record: Analysis result
        elapsed: Seconds spent analyzing the item
    """
    marker = " (File)" if record.is_file else ""
    lines = [
        f"{index} -> {preview(record.item)} ({elapsed:.8f}s){marker}",
        f"    - {record.length} (Length)",
    ]
    for key, value in record.counts.items():
        label, indent = COUNT_LABELS.get(key, (key.replace("_", " ").title(), 4))
        lines.append(f"{' ' * indent}- {value} {label}")
    return lines


def render_text(results: Sequence[tuple[ResultRecord, float]]) -> str:
    """Render the full human-readable report."""
    lines = [HEADER, "", arguments_line(len(results)), ""]
    for index, (record, elapsed) in enumerate(results, start=1):
        lines.extend(render_record(index, record, elapsed))
        lines.append("")
    return "\n".join(lines)


def render_json(results: Sequence[tuple[ResultRecord, float]]) -> str:
    """Render results as a JSON array."""
    payload = []
    for record, elapsed in results:
        entry = record.to_dict()
        entry["elapsed"] = elapsed
        payload.append(entry)
    return json.dumps(payload, indent=2, ensure_ascii=False)
