from __future__ import annotations

from typing import Mapping, Protocol


class RecoveryFlagRepository(Protocol):
    """Sparse ``"{recordId}-{studentId}" -> recovered`` mapping."""

    def get_all(self) -> Mapping[str, bool]:
        raise NotImplementedError

    def set_flag(self, key: str, value: bool) -> None:
        raise NotImplementedError
