"""Per-item analysis: choose a length source and run the selected classifiers."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from clen.classifiers import get_classifier
from clen.config import ClassificationConfig
from clen.models import ResultRecord
from clen.utils.length import (
    DEFAULT_WORD_SIZE,
    encode_text,
    measure_text_length,
    read_file_content,
)
from clen.utils.paths import probe

logger = logging.getLogger(__name__)


class Analyzer:
    """Runs one ClassificationConfig over input items.

    Items are independent of each other, so analyze_all may spread them over
    a thread pool; results always come back in input order.
    """

    def __init__(
        self,
        config: ClassificationConfig,
        word_size: int = DEFAULT_WORD_SIZE,
    ):
        self.config = config
        self.word_size = word_size

    def analyze(self, item: str) -> ResultRecord:
        """Analyze a single argument.

        The item is treated as file content only when the path exists and
        file-content mode is on. Otherwise its literal bytes are measured
        and classified.

        Args:
            item: Argument text (literal or path)

        Returns:
            ResultRecord with counts for every enabled option
        """
        file_probe = probe(item, self.config.file_content)
        from_file_content = file_probe.exists and self.config.file_content

        if from_file_content:
            length = file_probe.size
            data = read_file_content(item)
        else:
            data = encode_text(item)
            length = measure_text_length(data, self.word_size)

        logger.debug(
            f"{item!r}: length={length} file={file_probe.exists} "
            f"content={from_file_content}"
        )

        counts: dict[str, int] = {}
        for name in self.config.selected():
            if name == "bytes":
                counts["bytes"] = length
                continue
            classifier = get_classifier(name)
            if classifier is not None:
                counts.update(classifier.classify(data))

        return ResultRecord(
            item=item,
            length=length,
            is_file=file_probe.exists,
            from_file_content=from_file_content,
            counts=counts,
        )

    def analyze_all(self, items: Iterable[str], jobs: int = 1) -> list[ResultRecord]:
        """Analyze items in order.

        Args:
            items: Arguments to analyze
            jobs: Worker threads; 1 runs inline

        Returns:
            One ResultRecord per item, in input order
        """
        items = list(items)
        if jobs <= 1 or len(items) <= 1:
            return [self.analyze(item) for item in items]

        with ThreadPoolExecutor(max_workers=jobs) as executor:
            return list(executor.map(self.analyze, items))


def analyze(
    item: str,
    config: ClassificationConfig,
    word_size: int = DEFAULT_WORD_SIZE,
) -> ResultRecord:
    """Analyze one item with the given config."""
    return Analyzer(config, word_size).analyze(item)


def analyze_all(
    items: Iterable[str],
    config: ClassificationConfig,
    jobs: int = 1,
    word_size: int = DEFAULT_WORD_SIZE,
) -> list[ResultRecord]:
    """Analyze items in order with the given config."""
    return Analyzer(config, word_size).analyze_all(items, jobs)
