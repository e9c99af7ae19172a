import threading
from typing import Dict, List, Optional

from .seed import PROCEDURE_DURATIONS
from ....application.ports.queue_repo import QueueRepository, QueueEntryDto


class InMemoryQueueStore(QueueRepository):
    def __init__(self, durations: Optional[Dict[str, int]] = None) -> None:
        self._lock = threading.RLock()
        self._durations: Dict[str, int] = dict(durations if durations is not None else PROCEDURE_DURATIONS)
        self._entries: List[QueueEntryDto] = []

    def locked(self):
        return self._lock

    def procedure_duration(self, procedure: str) -> Optional[int]:
        return self._durations.get(procedure)

    def procedures(self) -> Dict[str, int]:
        return dict(self._durations)

    def entries(self) -> List[QueueEntryDto]:
        with self._lock:
            return list(self._entries)

    def append(self, entry: QueueEntryDto) -> None:
        with self._lock:
            self._entries.append(entry)
