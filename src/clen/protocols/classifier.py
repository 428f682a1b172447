"""Protocol for single-pass text classifiers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Classifier(Protocol):
    """Protocol for byte classifiers.

    Implementations make one left-to-right pass over the input and return
    their counts keyed by name. Most return a single entry; the case
    classifier returns two. Uses structural subtyping - no inheritance
    required.
    """

    @property
    def name(self) -> str:
        """Return the option name this classifier answers to (e.g. 'words')."""
        ...

    def classify(self, data: bytes) -> dict[str, int]:
        """Count occurrences in data."""
        ...
