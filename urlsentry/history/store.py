import json
import logging
import threading
import time
import uuid
from typing import Iterator, Optional, Tuple

from urlsentry.config import HISTORY_CAPACITY, HISTORY_KEY
from urlsentry.history.migration import migrate_record
from urlsentry.history.storage import KeyValueStorage
from urlsentry.models import HistoryEntry, UnifiedAssessment

logger = logging.getLogger(__name__)


def entry_from_assessment(assessment: UnifiedAssessment, timestamp: Optional[int] = None) -> HistoryEntry:
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return HistoryEntry(
        id=uuid.uuid4().hex,
        url=assessment.url,
        label=assessment.label,
        category=assessment.category,
        score_range=assessment.score_range,
        threat_description=assessment.threat_description,
        reputation_description=assessment.reputation_description,
        timestamp=timestamp,
    )


class HistoryStore:
    """
    Bounded history of assessments, most recent first, one entry per URL.

    Writers are serialized by a lock. Readers get the last committed tuple,
    which nobody can mutate.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        capacity: int = HISTORY_CAPACITY,
        key: str = HISTORY_KEY,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._storage = storage
        self._capacity = capacity
        self._key = key
        self._lock = threading.Lock()
        self._entries: Tuple[HistoryEntry, ...] = self._load()

    @property
    def capacity(self) -> int:
        return self._capacity

    # -------------------------------------------------------
    # Persistence
    # -------------------------------------------------------

    def _load(self) -> Tuple[HistoryEntry, ...]:
        try:
            payload = self._storage.get(self._key)
        except Exception as e:  # noqa: BLE001
            logger.error("Could not read history %r: %s", self._key, e)
            return ()

        if payload is None:
            return ()

        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            self._discard_corrupt(f"not valid JSON ({e})")
            return ()

        if not isinstance(data, list):
            self._discard_corrupt(f"top level is {type(data).__name__}, not an array")
            return ()

        entries = []
        seen = set()
        for record in data:
            entry = migrate_record(record)
            if entry is None:
                logger.warning("Dropping unreadable history record: %.100r", record)
                continue
            if entry.url in seen:
                continue
            seen.add(entry.url)
            entries.append(entry)

        return tuple(entries[: self._capacity])

    def _discard_corrupt(self, reason: str) -> None:
        logger.warning("History %r is corrupt (%s), starting empty", self._key, reason)
        self._delete()

    def _save(self, entries: Tuple[HistoryEntry, ...]) -> None:
        payload = json.dumps([entry.to_dict() for entry in entries])
        try:
            self._storage.set(self._key, payload)
        except Exception as e:  # noqa: BLE001
            logger.error("Could not persist history %r: %s", self._key, e)

    def _delete(self) -> None:
        try:
            self._storage.delete(self._key)
        except Exception as e:  # noqa: BLE001
            logger.error("Could not delete history %r: %s", self._key, e)

    # -------------------------------------------------------
    # Public API
    # -------------------------------------------------------

    def insert(self, entry: HistoryEntry) -> None:
        """Put `entry` first, replacing any entry for the same URL, and evict from the tail."""
        with self._lock:
            others = tuple(e for e in self._entries if e.url != entry.url)
            entries = ((entry,) + others)[: self._capacity]
            self._entries = entries
            self._save(entries)

    def clear(self) -> None:
        with self._lock:
            self._entries = ()
            self._delete()

    def list(self) -> Tuple[HistoryEntry, ...]:
        return self._entries

    def get(self, url: str) -> Optional[HistoryEntry]:
        return next((e for e in self._entries if e.url == url), None)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)
