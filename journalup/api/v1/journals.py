"""Journal endpoints: journals and their entries, scoped to the caller."""

import uuid

from fastapi import APIRouter

from journalup.api.deps import JournalServiceDep
from journalup.api.v1.auth import CurrentUserDep
from journalup.schemas.journals import EntryCreate, EntryOut, JournalCreate, JournalOut

router = APIRouter()


@router.post("", response_model=JournalOut)
def create_journal(
    body: JournalCreate,
    user: CurrentUserDep,
    journal_service: JournalServiceDep,
) -> JournalOut:
    return JournalOut.model_validate(journal_service.create_journal(user.id, body.title))


@router.get("", response_model=list[JournalOut])
def list_journals(
    user: CurrentUserDep,
    journal_service: JournalServiceDep,
) -> list[JournalOut]:
    return [JournalOut.model_validate(j) for j in journal_service.get_journals(user.id)]


@router.post("/{journal_id}/entries", response_model=EntryOut)
async def create_entry(
    journal_id: uuid.UUID,
    body: EntryCreate,
    user: CurrentUserDep,
    journal_service: JournalServiceDep,
) -> EntryOut:
    """Add an entry to one of the caller's journals (403 for someone else's journal)."""
    entry = await journal_service.create_entry(user.id, journal_id, body.content)
    return EntryOut.model_validate(entry)


@router.get("/{journal_id}/entries", response_model=list[EntryOut])
def list_entries(
    journal_id: uuid.UUID,
    user: CurrentUserDep,
    journal_service: JournalServiceDep,
) -> list[EntryOut]:
    return [EntryOut.model_validate(e) for e in journal_service.get_entries(user.id, journal_id)]
