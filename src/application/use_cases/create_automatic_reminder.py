"""
Create Automatic Reminder Use Case.

Entry point called right after a contract is saved: schedules the
follow-up memo the contract's product line calls for, if any.
"""

from collections.abc import Callable
from datetime import datetime

from src.config import get_logger
from src.core.entities.contract import ContractSnapshot
from src.core.entities.reminder import ReminderOutcome
from src.core.interfaces.classifier import IContractClassifier
from src.core.interfaces.memo_store import IMemoStore
from src.core.services.automatic_reminders import AutomaticReminderService

logger = get_logger(__name__)


class CreateAutomaticReminderUseCase:
    """
    Use case wiring the automatic reminder service to the memo store.

    Falls back to the SQLite memo store and the keyword classifier when
    no collaborators are injected.
    """

    def __init__(
        self,
        memo_store: IMemoStore | None = None,
        classifier: IContractClassifier | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._memo_store = memo_store
        self._classifier = classifier
        self._clock = clock or datetime.now

    async def _get_memo_store(self) -> IMemoStore:
        if self._memo_store is None:
            from src.infrastructure.storage.sqlite import get_memo_store
            self._memo_store = await get_memo_store()
        return self._memo_store

    async def execute(
        self,
        contract: ContractSnapshot,
        user_id: str,
        organization_id: str,
    ) -> ReminderOutcome:
        """
        Create the automatic reminder for a freshly created contract.

        Args:
            contract: Contract as entered at creation time.
            user_id: Advisor who created the contract.
            organization_id: Organization the advisor belongs to.

        Returns:
            ReminderOutcome; never raises.
        """
        service = AutomaticReminderService(
            memo_store=await self._get_memo_store(),
            classifier=self._classifier,
            clock=self._clock,
        )

        outcome = await service.create_automatic_reminder(
            contract, user_id, organization_id
        )

        logger.info(
            "automatic_reminder_use_case_done",
            success=outcome.success,
            reminder_created=outcome.reminder_created,
        )
        return outcome
