"""Classification options for an inspection run."""

import re
from dataclasses import dataclass, fields
from typing import Iterable

# Options in report order; file_content changes the source, not the counts
REPORT_ORDER = (
    "letters",
    "cases",
    "numbers",
    "sentences",
    "special_signs",
    "words",
    "bytes",
    "quotes",
)


class UnknownOptionError(ValueError):
    """Raised when an option name does not match any classification option."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown option: {name}")


def normalize_option_name(name: str) -> str:
    """Map 'specialSigns', 'special-signs' and 'special_signs' to one form."""
    name = re.sub(r"(?<=[a-z])([A-Z])", r"_\1", name.strip())
    return name.replace("-", "_").lower()


@dataclass(frozen=True)
class ClassificationConfig:
    """Which counts to compute for every item of one invocation.

    Case counts depend on letters: `cases` without `letters` is accepted but
    nothing is computed for it.
    """

    letters: bool = False
    cases: bool = False
    numbers: bool = False
    sentences: bool = False
    special_signs: bool = False
    words: bool = False
    bytes: bool = False
    quotes: bool = False
    file_content: bool = False

    @property
    def count_cases(self) -> bool:
        return self.letters and self.cases

    @property
    def cases_ignored(self) -> bool:
        """True when cases was requested without letters."""
        return self.cases and not self.letters

    def selected(self) -> list[str]:
        """Return enabled count options in report order."""
        selected = []
        for name in REPORT_ORDER:
            if name == "cases":
                if self.count_cases:
                    selected.append(name)
            elif getattr(self, name):
                selected.append(name)
        return selected

    def enabled_counts(self) -> list[str]:
        """Return the count keys that will be reported, in report order."""
        keys = []
        for name in self.selected():
            if name == "cases":
                keys.extend(("uppercase", "lowercase"))
            else:
                keys.append(name)
        return keys

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ClassificationConfig":
        """Build a config enabling the named options.

        Args:
            names: Option names (camelCase, kebab-case or snake_case)

        Raises:
            UnknownOptionError: If a name is not a known option
        """
        known = {f.name for f in fields(cls)}
        enabled = {}
        for name in names:
            key = normalize_option_name(name)
            if key not in known:
                raise UnknownOptionError(name)
            enabled[key] = True
        return cls(**enabled)

    @classmethod
    def all(cls, file_content: bool = False) -> "ClassificationConfig":
        """Enable every count option."""
        return cls(**{name: True for name in REPORT_ORDER}, file_content=file_content)
