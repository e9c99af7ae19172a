from dataclasses import dataclass
from typing import ContextManager, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class QueueEntryDto:
    name: str
    procedure: str
    # Copied from the duration table when the patient joins
    duration: int


class QueueRepository(Protocol):
    def locked(self) -> ContextManager[None]:
        ...

    def procedure_duration(self, procedure: str) -> Optional[int]:
        ...

    def procedures(self) -> Dict[str, int]:
        ...

    def entries(self) -> List[QueueEntryDto]:
        ...

    def append(self, entry: QueueEntryDto) -> None:
        ...
