"""
Automatic Reminder Service.

Decides, when a contract is created, whether a follow-up memo should be
scheduled for the advisor and creates it. No background scheduler: the
memo is created once and the memo store owns it from then on.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from src.config import get_logger
from src.core.entities.contract import ContractCategory, ContractSnapshot
from src.core.entities.reminder import ReminderOutcome, ReminderTemplate
from src.core.interfaces.classifier import IContractClassifier
from src.core.interfaces.memo_store import IMemoStore
from src.core.services.contract_classifier import KeywordContractClassifier
from src.core.services.reminder_rules import has_reminder_rule, select_reminder

logger = get_logger(__name__)

MESSAGE_UNSUPPORTED_CATEGORY = "Aucun rappel automatique pour ce type de contrat"
MESSAGE_NOT_NEEDED = "Aucun rappel nécessaire pour cette configuration"
MESSAGE_ERROR = "Erreur lors de la création du rappel automatique"


def as_category(value: ContractCategory | str) -> ContractCategory:
    """Coerce a classifier result; anything outside the known categories is OTHER."""
    try:
        return ContractCategory(value)
    except ValueError:
        return ContractCategory.OTHER


def format_created_message(template: ReminderTemplate) -> str:
    """Confirmation shown to the advisor once the memo exists."""
    message = f'Rappel automatique créé : "{template.title}"'
    if template.days_offset > 0:
        message += f" (prévu dans {template.days_offset} jours)"
    return message


class AutomaticReminderService:
    """
    Layer-pure service turning a new contract into at most one memo.

    Depends only on core interfaces. The clock returns local wall time;
    the memo is due ``days_offset`` days from today at the current
    time of day.
    """

    def __init__(
        self,
        memo_store: IMemoStore,
        classifier: IContractClassifier | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._memo_store = memo_store
        self._classifier = classifier or KeywordContractClassifier()
        self._clock = clock

    async def create_automatic_reminder(
        self,
        contract: ContractSnapshot,
        user_id: str,
        organization_id: str,
    ) -> ReminderOutcome:
        """
        Create the follow-up memo a new contract calls for, if any.

        Never raises: any failure while classifying or persisting is
        logged and reported as an unsuccessful outcome.

        Args:
            contract: Contract as entered at creation time.
            user_id: Advisor the memo is assigned to.
            organization_id: Organization owning the memo.

        Returns:
            ReminderOutcome describing what happened.
        """
        log = logger.bind(
            product=contract.product,
            user_id=user_id,
            organization_id=organization_id,
        )

        try:
            category = as_category(self._classifier.get_contract_category(contract.product))

            if not has_reminder_rule(category):
                log.info("automatic_reminder_skipped", category=category.value)
                return ReminderOutcome(
                    success=True,
                    message=MESSAGE_UNSUPPORTED_CATEGORY,
                    reminder_created=False,
                )

            template = select_reminder(category, contract)
            if template is None:
                log.info("automatic_reminder_not_needed", category=category.value)
                return ReminderOutcome(
                    success=True,
                    message=MESSAGE_NOT_NEEDED,
                    reminder_created=False,
                )

            now = self._clock()
            due_date = now.date() + timedelta(days=template.days_offset)
            due_time = now.strftime("%H:%M")

            memo = await self._memo_store.create_memo(
                user_id=user_id,
                organization_id=organization_id,
                title=template.title,
                description=template.description,
                due_date=due_date,
                due_time=due_time,
            )

            log.info(
                "automatic_reminder_created",
                category=category.value,
                memo_id=memo.id,
                due_date=due_date.isoformat(),
                due_time=due_time,
            )
            return ReminderOutcome(
                success=True,
                message=format_created_message(template),
                reminder_created=True,
                memo_id=memo.id,
            )

        except Exception:
            log.error("automatic_reminder_failed", exc_info=True)
            return ReminderOutcome(
                success=False,
                message=MESSAGE_ERROR,
                reminder_created=False,
            )
