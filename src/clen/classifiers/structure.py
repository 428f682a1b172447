"""Counters for multi-byte structures: sentences, words and quoted segments."""

import string

TERMINAL_MARKS = frozenset(b".?!")
QUOTE_MARKS = frozenset(b"'\"")
WHITESPACE = frozenset(string.whitespace.encode())


def count_sentences(data: bytes) -> int:
    """Count sentence endings.

    Each '.', '?' or '!' ends one sentence. A quote immediately after the
    mark belongs to the same ending and is skipped, so '?"' counts once.
    """
    count = 0
    index = 0
    end = len(data)
    while index < end:
        if data[index] in TERMINAL_MARKS:
            count += 1
            if index + 1 < end and data[index + 1] in QUOTE_MARKS:
                index += 1
        index += 1
    return count


def count_words(data: bytes) -> int:
    """Count maximal runs of non-whitespace bytes."""
    count = 0
    in_word = False
    for byte in data:
        if byte in WHITESPACE:
            in_word = False
        elif not in_word:
            count += 1
            in_word = True
    return count


def count_quotes(data: bytes) -> int:
    """Count complete quoted segments.

    An opening ' or " pairs with the nearest later occurrence of the same
    character, and scanning resumes after the closer. An opener with no
    closer adds nothing; scanning resumes at the byte after it.
    """
    data = bytes(data)
    count = 0
    index = 0
    end = len(data)
    while index < end:
        quote = data[index]
        if quote in QUOTE_MARKS:
            closing = data.find(quote, index + 1)
            if closing != -1:
                count += 1
                index = closing
        index += 1
    return count


class SentenceClassifier:
    name = "sentences"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"sentences": count_sentences(data)}


class WordClassifier:
    name = "words"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"words": count_words(data)}


class QuoteClassifier:
    name = "quotes"

    def classify(self, data: bytes) -> dict[str, int]:
        return {"quotes": count_quotes(data)}
