"""Journal service: ownership checks, entry scoring and memory graph sync."""

import logging
import uuid

from journalup.core.errors import AppError, AuthorizationError
from journalup.models import Entry, Journal
from journalup.repositories.journals import JournalRepository
from journalup.services.entry_analysis import score_sentiment
from journalup.services.memory import MemoryGraphClient

logger = logging.getLogger(__name__)


class JournalService:
    def __init__(
        self,
        repository: JournalRepository,
        memory: MemoryGraphClient | None = None,
    ) -> None:
        self.repository = repository
        self.memory = memory

    def create_journal(self, user_id: uuid.UUID, title: str) -> Journal:
        return self.repository.create(user_id, title)

    def get_journals(self, user_id: uuid.UUID) -> list[Journal]:
        return self.repository.list_for_user(user_id)

    def get_owned_journal(self, user_id: uuid.UUID, journal_id: uuid.UUID) -> Journal:
        """Raises NotFoundError if missing, AuthorizationError if owned by someone else."""
        journal = self.repository.find_by_id(journal_id)
        if journal.user_id != user_id:
            raise AuthorizationError("You do not have access to this journal")
        return journal

    async def create_entry(
        self,
        user_id: uuid.UUID,
        journal_id: uuid.UUID,
        content: str,
    ) -> Entry:
        """
        Store an entry with its sentiment score, then mirror it to the memory graph.

        The entry is committed before the graph push; a push failure is logged
        and does not fail the request.
        """
        journal = self.get_owned_journal(user_id, journal_id)
        sentiment = score_sentiment(content)
        entry = self.repository.create_entry(journal.id, content, sentiment.score)

        if self.memory is not None:
            graph_data = {
                "id": str(entry.id),
                "content": entry.content,
                "metadata": {
                    "type": "journal_entry",
                    "journalId": str(journal.id),
                    "sentiment": sentiment.label,
                },
            }
            try:
                await self.memory.add(str(user_id), graph_data)
            except AppError as e:
                logger.warning(
                    "Entry not added to memory graph: %s",
                    e.message,
                    extra={"entry_id": str(entry.id)},
                )
        return entry

    def get_entries(self, user_id: uuid.UUID, journal_id: uuid.UUID) -> list[Entry]:
        journal = self.get_owned_journal(user_id, journal_id)
        return self.repository.list_entries(journal.id)
