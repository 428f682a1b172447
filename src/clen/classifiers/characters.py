"""Per-byte character class counters (ASCII semantics)."""

import string

from clen.models import CaseCounts

UPPERCASE = frozenset(string.ascii_uppercase.encode())
LOWERCASE = frozenset(string.ascii_lowercase.encode())
LETTERS = UPPERCASE | LOWERCASE
DIGITS = frozenset(string.digits.encode())
SPECIAL_SIGNS = frozenset(b"!@#$%^&*()-_=+[]{}|;:'\",.<>?/\\~`")


def count_letters(data: bytes) -> int:
    """Count ASCII letters (A-Z, a-z)."""
    return sum(1 for byte in data if byte in LETTERS)


def count_cases(data: bytes) -> CaseCounts:
    """Split ASCII letters into uppercase and lowercase totals."""
    upper = lower = 0
    for byte in data:
        if byte in UPPERCASE:
            upper += 1
        elif byte in LOWERCASE:
            lower += 1
    return CaseCounts(upper, lower)


def count_numbers(data: bytes) -> int:
    """Count ASCII digits (0-9)."""
    return sum(1 for byte in data if byte in DIGITS)


def count_special_signs(data: bytes) -> int:
    """Count punctuation and symbol bytes from the fixed special-sign set.

    Terminal marks and quote characters are members too, so the same byte
    can also show up in the sentence and quote totals.
    """
    return sum(1 for byte in data if byte in SPECIAL_SIGNS)


class LetterClassifier:
    name = "letters"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"letters": count_letters(data)}


class CaseClassifier:
    """Case distribution; only reported alongside letters."""

    name = "cases"

    def classify(self, data: bytes) -> dict[str, int]:
        counts = count_cases(data)
        return {"uppercase": counts.upper, "lowercase": counts.lower}


class NumberClassifier:
    name = "numbers"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"numbers": count_numbers(data)}


class SpecialSignClassifier:
    name = "special_signs"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"special_signs": count_special_signs(data)}
