"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.classifier import IContractClassifier
from src.core.interfaces.memo_store import IMemoStore

__all__ = [
    # Classification interfaces
    "IContractClassifier",
    # Storage interfaces
    "IMemoStore",
]
