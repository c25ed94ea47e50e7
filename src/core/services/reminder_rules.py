"""
Per-category reminder rules.

Each rule is a pure function of the contract snapshot returning the
reminder to schedule, or None when the contract needs no follow-up.
REMINDER_RULES maps every category to its rule; OTHER has none.
"""

from collections.abc import Callable

from src.core.entities.contract import ContractCategory, ContractSnapshot, RenewalStatus
from src.core.entities.reminder import ReminderTemplate

ReminderRule = Callable[[ContractSnapshot], ReminderTemplate | None]

# Days before checking that the bank accepted the borrower insurance rider
BORROWER_RIDER_CHECK_DAYS = 21


def _concerned(contract: ContractSnapshot) -> str:
    return f"Contrat concerné : {contract.product}"


def get_reminder_for_retirement_plan(contract: ContractSnapshot) -> ReminderTemplate | None:
    """Existing PER: request the transfer and stop payments on the old plan."""
    if contract.has_existing_retirement_plan is True:
        return ReminderTemplate(
            title="Faire demande de transfert + suspension des versements sur l'ancien PER",
            description=_concerned(contract),
            days_offset=0,
        )
    return None


def get_reminder_for_life_insurance(contract: ContractSnapshot) -> ReminderTemplate | None:
    """Buyback on an existing life insurance contract needs follow-up."""
    if (
        contract.has_existing_life_insurance is True
        and contract.buyback_performed is True
    ):
        return ReminderTemplate(
            title="Suivi du rachat total ou partiel",
            description=_concerned(contract),
            days_offset=0,
        )
    return None


def get_reminder_for_health_mutual(contract: ContractSnapshot) -> ReminderTemplate:
    return ReminderTemplate(
        title="Avez-vous fait la RIA ?",
        description=f"RIA (Résiliation Infra-Annuelle) - Contrat : {contract.product}",
        days_offset=0,
    )


def get_reminder_for_provident(contract: ContractSnapshot) -> ReminderTemplate | None:
    """Renewed or replacing provident contracts need the old one cancelled."""
    status = contract.renewal_status
    if status in (RenewalStatus.RENEWAL, RenewalStatus.REPLACEMENT):
        return ReminderTemplate(
            title="Avez-vous effectué la RIA (résiliation ou non reconduction) ?",
            description=f"Contrat en {status.value} : {contract.product}",
            days_offset=0,
        )
    # NEW and UNSET both mean there is nothing to cancel
    return None


def get_reminder_for_borrower_insurance(contract: ContractSnapshot) -> ReminderTemplate:
    return ReminderTemplate(
        title="Appeler le client pour vérification de l'avenant bancaire",
        description=_concerned(contract),
        days_offset=BORROWER_RIDER_CHECK_DAYS,
    )


REMINDER_RULES: dict[ContractCategory, ReminderRule | None] = {
    ContractCategory.RETIREMENT_PLAN: get_reminder_for_retirement_plan,
    ContractCategory.LIFE_INSURANCE: get_reminder_for_life_insurance,
    ContractCategory.HEALTH_MUTUAL: get_reminder_for_health_mutual,
    ContractCategory.PROVIDENT: get_reminder_for_provident,
    ContractCategory.BORROWER_INSURANCE: get_reminder_for_borrower_insurance,
    ContractCategory.OTHER: None,
}


def has_reminder_rule(category: ContractCategory) -> bool:
    """Whether contracts of this category are evaluated at all."""
    return REMINDER_RULES.get(category) is not None


def select_reminder(
    category: ContractCategory, contract: ContractSnapshot
) -> ReminderTemplate | None:
    """Evaluate the rule registered for ``category``."""
    rule = REMINDER_RULES.get(category)
    if rule is None:
        return None
    return rule(contract)
