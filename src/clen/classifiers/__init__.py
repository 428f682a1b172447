"""Byte classifiers for CLEN."""

from typing import Optional

from clen.classifiers.characters import (
    CaseClassifier,
    LetterClassifier,
    NumberClassifier,
    SpecialSignClassifier,
    count_cases,
    count_letters,
    count_numbers,
    count_special_signs,
)
from clen.classifiers.structure import (
    QuoteClassifier,
    SentenceClassifier,
    WordClassifier,
    count_quotes,
    count_sentences,
    count_words,
)
from clen.protocols import Classifier

# Registry of available classifiers, in report order
_CLASSIFIERS: dict[str, Classifier] = {
    c.name: c
    for c in (
        LetterClassifier(),
        CaseClassifier(),
        NumberClassifier(),
        SentenceClassifier(),
        SpecialSignClassifier(),
        WordClassifier(),
        QuoteClassifier(),
    )
}


def get_classifier(name: str) -> Optional[Classifier]:
    """Find the classifier registered under name.

    Args:
        name: Option name such as 'letters' or 'special_signs'

    Returns:
        The registered Classifier, or None
    """
    return _CLASSIFIERS.get(name)


def register_classifier(classifier: Classifier) -> None:
    """Register a classifier, replacing any with the same name.

    Args:
        classifier: An object implementing the Classifier protocol
    """
    _CLASSIFIERS[classifier.name] = classifier


def available_classifiers() -> list[str]:
    """Return registered classifier names in report order."""
    return list(_CLASSIFIERS)


__all__ = [
    "get_classifier",
    "register_classifier",
    "available_classifiers",
    "count_letters",
    "count_cases",
    "count_numbers",
    "count_sentences",
    "count_special_signs",
    "count_words",
    "count_quotes",
]
