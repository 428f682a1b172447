"""Core data models for probes and analysis results."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple


class CaseCounts(NamedTuple):
    """Uppercase and lowercase letter totals."""

    upper: int
    lower: int


@dataclass(frozen=True)
class FileProbe:
    """Existence check for an argument interpreted as a path."""

    path: str
    exists: bool
    size: int = 0  # 0 unless file-content mode was requested


@dataclass(frozen=True)
class ResultRecord:
    """Analysis result for a single input item."""

    item: str
    length: int
    is_file: bool
    from_file_content: bool
    counts: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only view over a private copy
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def to_dict(self) -> dict:
        """Return a JSON-ready representation."""
        return {
            "item": self.item,
            "length": self.length,
            "is_file": self.is_file,
            "from_file_content": self.from_file_content,
            "counts": dict(self.counts),
        }
