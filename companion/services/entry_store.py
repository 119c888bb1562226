# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence
from pydantic import ValidationError

from companion.models.entries import MoodEntry, JournalEntry
from companion.utils.config import MOODS_COLLECTION, JOURNALS_COLLECTION, DEFAULT_MOOD

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def write(self, path: str, record: Any) -> None: ...

    def read_all(self, path: str) -> Optional[Any]: ...

    def delete(self, path: str) -> None: ...


def _always_confirm(prompt: str) -> bool:
    return True


def _log_notice(text: str):
    logger.info(f"💬 {text}")


class EntryStore:
    """
    Read-through cache of one store collection, newest entry first.

    Store failures are logged and leave the cached list as it was; malformed
    records are logged and skipped.
    """

    collection: str = ""
    entry_model = None
    label: str = "entry"
    required_fields: Sequence[str] = ()
    missing_notice: str = ""
    invalid_notice: str = ""
    saved_notice: str = ""
    deleted_notice: str = ""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = datetime.now,
        confirm: Callable[[str], bool] = _always_confirm,
        notify: Callable[[str], None] = _log_notice,
    ):
        self._store = store
        self._clock = clock
        self._confirm = confirm
        self._notify = notify
        self._last_key = 0
        self.entries: List = []

    def __len__(self):
        return len(self.entries)

    def _next_key(self, millis: int) -> str:
        # Keys follow the clock but never repeat, even within one millisecond.
        key = max(millis, self._last_key + 1)
        self._last_key = key
        return str(key)

    def save(self, fields: Dict[str, Any]) -> bool:
        if any(not str(fields.get(name) or "").strip() for name in self.required_fields):
            self._notify(self.missing_notice)
            return False

        now = self._clock()
        millis = int(now.timestamp() * 1000)
        try:
            entry = self.entry_model(
                **fields,
                date=now.strftime("%m/%d/%Y"),
                time=now.strftime("%I:%M:%S %p"),
                timestamp=millis,
            )
        except ValidationError as e:
            logger.warning(f"⚠️ Rejected {self.label} entry: {e}")
            self._notify(self.invalid_notice)
            return False

        key = self._next_key(millis)

        try:
            self._store.write(f"{self.collection}/{key}", entry.to_record())
        except Exception as e:
            logger.error(f"❌ Error saving {self.label}: {e}")
            self._notify(f"❌ Error saving {self.label}. Please try again.")
            return False

        logger.info(f"✅ {self.label.capitalize()} saved to Firebase: {key}")
        self.load_all()
        self._notify(self.saved_notice)
        return True

    def load_all(self) -> List:
        try:
            records = _iter_records(self._store.read_all(self.collection))
        except Exception as e:
            logger.error(f"❌ Error loading {self.collection}: {e}")
            return self.entries

        entries = []
        for key, record in records:
            # One bad record is skipped; the rest of the collection still lists
            try:
                entries.append(self.entry_model.model_validate({**record, "id": key}))
            except (ValidationError, TypeError) as e:
                logger.warning(f"⚠️ Skipping malformed {self.label} record {key}: {e}")

        # sort() is stable, so equal timestamps keep store order
        entries.sort(key=lambda entry: entry.timestamp, reverse=True)
        self.entries = entries
        return entries

    def delete(self, entry_id: str) -> bool:
        if not self._confirm(f"Delete this {self.label} entry?"):
            return False

        try:
            self._store.delete(f"{self.collection}/{entry_id}")
        except Exception as e:
            logger.error(f"❌ Error deleting {self.label} {entry_id}: {e}")
            return False

        logger.info(f"🗑️ {self.label.capitalize()} {entry_id} deleted")
        self.load_all()
        self._notify(self.deleted_notice)
        return True


def _iter_records(data):
    if not data:
        return []
    # The Realtime Database hands back arrays for dense integer keys
    if isinstance(data, list):
        return [(str(index), record) for index, record in enumerate(data) if record is not None]
    return list(data.items())


class MoodTracker(EntryStore):
    collection = MOODS_COLLECTION
    entry_model = MoodEntry
    label = "mood"
    required_fields = ("notes",)
    missing_notice = "Please add notes for your mood"
    invalid_notice = "Please choose a mood between 1 and 10"
    saved_notice = "✅ Mood tracked successfully!"
    deleted_notice = "✅ Mood deleted!"

    def __init__(self, store: KeyValueStore, **kwargs):
        super().__init__(store, **kwargs)
        self.current_mood = DEFAULT_MOOD
        self.notes = ""

    def save_mood(self, mood: int = None, notes: str = None) -> bool:
        """
        Saves the given mood, or the pending form values when none are passed.
        The form resets after a successful save.
        """
        mood = self.current_mood if mood is None else mood
        notes = self.notes if notes is None else notes
        saved = self.save({"mood": mood, "notes": notes})
        if saved:
            self.current_mood = DEFAULT_MOOD
            self.notes = ""
        return saved

    def load_moods(self) -> List[MoodEntry]:
        return self.load_all()

    def delete_mood(self, mood_id: str) -> bool:
        return self.delete(mood_id)


class JournalBook(EntryStore):
    collection = JOURNALS_COLLECTION
    entry_model = JournalEntry
    label = "journal"
    required_fields = ("title", "content")
    missing_notice = "Please add title and content for your journal"
    invalid_notice = "Please check your journal entry and try again"
    saved_notice = "✅ Journal entry saved successfully!"
    deleted_notice = "✅ Journal deleted!"

    def __init__(self, store: KeyValueStore, **kwargs):
        super().__init__(store, **kwargs)
        self.title = ""
        self.content = ""

    def save_journal(self, title: str = None, content: str = None) -> bool:
        title = self.title if title is None else title
        content = self.content if content is None else content
        saved = self.save({"title": title, "content": content})
        if saved:
            self.title = ""
            self.content = ""
        return saved

    def load_journals(self) -> List[JournalEntry]:
        return self.load_all()

    def delete_journal(self, journal_id: str) -> bool:
        return self.delete(journal_id)
