"""Protocol definitions for extensible components."""

from clen.protocols.classifier import Classifier

__all__ = ["Classifier"]
