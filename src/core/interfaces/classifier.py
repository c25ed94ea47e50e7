"""
Abstract interface for contract product classification.
"""

from abc import ABC, abstractmethod

from src.core.entities.contract import ContractCategory


class IContractClassifier(ABC):
    """Maps a free-text product name to a contract category."""

    @abstractmethod
    def get_contract_category(self, product: str) -> ContractCategory:
        """
        Classify a product name.

        Must be total: unknown or empty text maps to ContractCategory.OTHER.
        """
