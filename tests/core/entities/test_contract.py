"""Tests for contract entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.contract import ContractCategory, ContractSnapshot, RenewalStatus


class TestContractSnapshot:
    """Tests for ContractSnapshot."""

    def test_create_minimal(self):
        """Only the product is required; flags default to unknown."""
        contract = ContractSnapshot(product="Mutuelle Famille")
        assert contract.product == "Mutuelle Famille"
        assert contract.has_existing_retirement_plan is None
        assert contract.has_existing_life_insurance is None
        assert contract.buyback_performed is None
        assert contract.renewal_status == RenewalStatus.UNSET

    def test_accepts_form_field_names(self):
        """Subscription form keys populate the snapshot."""
        contract = ContractSnapshot.model_validate(
            {
                "produit": "Prévoyance TNS",
                "per_existant": False,
                "assurance_vie_existante": True,
                "rachat_effectue": True,
                "contrat_renouvellement_remplacement": "remplacement",
            }
        )
        assert contract.product == "Prévoyance TNS"
        assert contract.has_existing_retirement_plan is False
        assert contract.has_existing_life_insurance is True
        assert contract.buyback_performed is True
        assert contract.renewal_status == RenewalStatus.REPLACEMENT

    def test_empty_status_is_unset(self):
        """An empty status string is the explicit UNSET member."""
        contract = ContractSnapshot(product="x", renewal_status="")
        assert contract.renewal_status is RenewalStatus.UNSET
        assert contract.renewal_status is not RenewalStatus.NEW

    def test_none_status_is_unset(self):
        contract = ContractSnapshot(product="x", renewal_status=None)
        assert contract.renewal_status is RenewalStatus.UNSET

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ContractSnapshot(product="x", renewal_status="resiliation")

    def test_missing_product_rejected(self):
        with pytest.raises(ValidationError):
            ContractSnapshot()

    def test_is_immutable(self):
        """Snapshots cannot be modified after creation."""
        contract = ContractSnapshot(product="PER")
        with pytest.raises(ValidationError):
            contract.product = "Autre"


class TestContractCategory:
    """Tests for ContractCategory values."""

    def test_values(self):
        assert ContractCategory.RETIREMENT_PLAN.value == "PER"
        assert ContractCategory.LIFE_INSURANCE.value == "ASSURANCE_VIE"
        assert ContractCategory.HEALTH_MUTUAL.value == "MUTUELLE"
        assert ContractCategory.PROVIDENT.value == "PREVOYANCE"
        assert ContractCategory.BORROWER_INSURANCE.value == "ASSURANCE_EMPRUNTEUR"
        assert ContractCategory.OTHER.value == "AUTRE"

    def test_closed_set(self):
        assert len(ContractCategory) == 6
