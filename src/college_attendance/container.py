from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .attendance.kv_attendance_ledger import KeyValueAttendanceLedger
from .attendance.service import AttendanceService
from .common.ids import MillisecondIdSource
from .core.constants import DEFAULT_STORE_NAMESPACE
from .recovery.kv_recovery_repository import KeyValueRecoveryRepository
from .recovery.service import RecoveryService
from .roster.kv_roster_repository import KeyValueRosterRepository
from .roster.service import RosterService
from .storage.connection import DatabaseConnection, db_config_from_dict
from .storage.mysql_store import MySQLKeyValueStore
from .storage.store import InMemoryKeyValueStore, KeyValueStore
from .subjects.kv_subject_repository import KeyValueSubjectRepository
from .subjects.service import SubjectService
from .users.credentials import CredentialVerifier, HashedCredentialVerifier, StaticCredentialVerifier
from .users.service import AuthService, SessionService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    roster_repo: KeyValueRosterRepository
    subjects_repo: KeyValueSubjectRepository
    attendance_ledger: KeyValueAttendanceLedger
    recovery_repo: KeyValueRecoveryRepository

    auth_service: AuthService
    session_service: SessionService
    roster_service: RosterService
    subject_service: SubjectService
    attendance_service: AttendanceService
    recovery_service: RecoveryService


def build_store(*, backend: str, db_config: Optional[dict] = None, namespace: str = DEFAULT_STORE_NAMESPACE):
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryKeyValueStore(), None
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(db_config_from_dict(db_config or {}))
        return MySQLKeyValueStore(conn, namespace=namespace), conn
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_verifier(*, backend: str, accounts: Iterable[dict] = ()) -> CredentialVerifier:
    backend = (backend or "static").lower()
    if backend == "static":
        return StaticCredentialVerifier()
    if backend == "hashed":
        return HashedCredentialVerifier.from_config(accounts)
    raise ValueError(f"Unknown CREDENTIALS_BACKEND: {backend!r}")


def build_container(
    *,
    store: KeyValueStore,
    verifier: Optional[CredentialVerifier] = None,
    ids: Optional[MillisecondIdSource] = None,
) -> Container:
    ids = ids or MillisecondIdSource()

    roster_repo = KeyValueRosterRepository(store)
    subjects_repo = KeyValueSubjectRepository(store)
    attendance_ledger = KeyValueAttendanceLedger(store)
    recovery_repo = KeyValueRecoveryRepository(store)

    auth_service = AuthService(verifier or StaticCredentialVerifier())
    session_service = SessionService(auth_service)
    roster_service = RosterService(roster_repo)
    subject_service = SubjectService(subjects_repo, ids=ids)
    attendance_service = AttendanceService(attendance_ledger, roster_service, ids=ids)
    recovery_service = RecoveryService(recovery_repo, attendance_service)

    return Container(
        store=store,
        roster_repo=roster_repo,
        subjects_repo=subjects_repo,
        attendance_ledger=attendance_ledger,
        recovery_repo=recovery_repo,
        auth_service=auth_service,
        session_service=session_service,
        roster_service=roster_service,
        subject_service=subject_service,
        attendance_service=attendance_service,
        recovery_service=recovery_service,
    )
