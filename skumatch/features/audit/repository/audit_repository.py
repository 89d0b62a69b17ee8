"""
Audit Repository.
Process-local, bounded store of audit entries.
"""
import threading
from collections import deque
from typing import Deque, List, Optional

from skumatch.common.base.base_repository import BaseRepository
from skumatch.features.audit.domain.audit_entry import AuditEntry

DEFAULT_MAX_ENTRIES = 1000


class AuditRepository(BaseRepository[AuditEntry]):
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self._entries: Deque[AuditEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def save(self, entry: AuditEntry) -> AuditEntry:
        with self._lock:
            self._entries.append(entry)
        return entry

    def find_all(self) -> List[AuditEntry]:
        with self._lock:
            return list(self._entries)

    def find_recent(self, limit: int) -> List[AuditEntry]:
        """Newest `limit` entries, oldest first."""
        with self._lock:
            entries = list(self._entries)
        return entries[-limit:] if limit > 0 else []

    def find_by_id(self, image_id: str) -> Optional[AuditEntry]:
        """
        Latest entry recorded for the client-supplied *image_id*.

        Audit entries have no id of their own; the image id is the only key
        a client can look them up by.
        """
        with self._lock:
            for entry in reversed(self._entries):
                if entry.image_id == image_id:
                    return entry
        return None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
