"""Data models for CLEN."""

from clen.models.result import CaseCounts, FileProbe, ResultRecord

__all__ = ["ResultRecord", "FileProbe", "CaseCounts"]
