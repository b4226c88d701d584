from __future__ import annotations

from typing import Mapping

from ..core.constants import RECOVERY_KEY
from ..storage.store import KeyValueStore, load_json, save_json
from .repository import RecoveryFlagRepository


class KeyValueRecoveryRepository(RecoveryFlagRepository):
    def __init__(self, store: KeyValueStore, *, key: str = RECOVERY_KEY):
        self._store = store
        self._key = key

    def get_all(self) -> Mapping[str, bool]:
        return {str(k): bool(v) for k, v in load_json(self._store, self._key, {}).items()}

    def set_flag(self, key: str, value: bool) -> None:
        flags = dict(self.get_all())
        flags[key] = bool(value)
        save_json(self._store, self._key, flags)
