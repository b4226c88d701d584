from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from college_attendance.container import build_container, build_store
from college_attendance.seed import DEMO_CLASS, seed_demo_data
from college_attendance.settings import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store, _ = build_store(
        backend=settings.STORE_BACKEND,
        db_config=settings.DB_CONFIG,
        namespace=settings.STORE_NAMESPACE,
    )
    container = build_container(store=store)
    seed_demo_data(container.roster_service, container.subject_service)

    print(f"OK: Seeded class {DEMO_CLASS} -> backend={settings.STORE_BACKEND} namespace={settings.STORE_NAMESPACE}")


if __name__ == "__main__":
    main()
