"""CLEN - fast per-argument text inspection."""

from clen.analyzer import Analyzer, analyze, analyze_all
from clen.config import ClassificationConfig, UnknownOptionError
from clen.models import CaseCounts, FileProbe, ResultRecord

__version__ = "0.1.0"

__all__ = [
    "Analyzer",
    "analyze",
    "analyze_all",
    "ClassificationConfig",
    "UnknownOptionError",
    "ResultRecord",
    "FileProbe",
    "CaseCounts",
]
