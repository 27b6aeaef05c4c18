import asyncio
from typing import Dict, List, Optional

from ..schemas.resume import ResumeRecord
from ..utils.identifiers import generate_id


class RecordStore:
    """Append-only, process-lifetime store of generated resume records."""

    def __init__(self):
        # dicts keep insertion order
        self._records: Dict[str, ResumeRecord] = {}
        self._lock = asyncio.Lock()

    async def append(self, record: ResumeRecord) -> ResumeRecord:
        """
        Store `record` and return it as stored.
        A record whose id is already taken is stored under a fresh id.
        """
        async with self._lock:
            while record.id in self._records:
                record = record.model_copy(update={"id": generate_id()})
            self._records[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[ResumeRecord]:
        return self._records.get(record_id)

    def all(self) -> List[ResumeRecord]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
