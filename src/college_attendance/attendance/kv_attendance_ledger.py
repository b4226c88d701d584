from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ATTENDANCE_KEY
from ..storage.store import KeyValueStore, load_json, save_json
from .model import AttendanceRecord
from .repository import AttendanceLedger


class KeyValueAttendanceLedger(AttendanceLedger):
    def __init__(self, store: KeyValueStore, *, key: str = ATTENDANCE_KEY):
        self._store = store
        self._key = key

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_dict(d) for d in load_json(self._store, self._key, [])]

    def append(self, record: AttendanceRecord) -> None:
        raw = load_json(self._store, self._key, [])
        raw.append(record.to_dict())
        save_json(self._store, self._key, raw)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        for r in self.list_all():
            if r.id == record_id:
                return r
        return None
