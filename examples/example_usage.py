"""Example: drive the service layer directly (no Flask).

Controllers are thin; the use cases live in the services.
"""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from college_attendance.container import build_container
from college_attendance.core.enums import Role
from college_attendance.storage.store import InMemoryKeyValueStore


def main():
    container = build_container(store=InMemoryKeyValueStore())
    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice\n2,A02,Bob")
    saved = container.attendance_service.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="2", absent_ids=["5-1"]
    )
    print(saved.record.to_dict())


if __name__ == "__main__":
    main()
