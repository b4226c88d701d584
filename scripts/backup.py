"""Backup the key-value namespace to a JSON file.

Note: Each key is written as its stored string value, so the file can be
loaded back key by key.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from college_attendance.container import build_store
from college_attendance.settings import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store, _ = build_store(
        backend=settings.STORE_BACKEND,
        db_config=settings.DB_CONFIG,
        namespace=settings.STORE_NAMESPACE,
    )
    if settings.STORE_BACKEND == "memory":
        raise SystemExit("STORE_BACKEND=memory has nothing durable to back up.")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{settings.STORE_NAMESPACE}_{ts}.json"

    dump = {key: store.get(key) for key in store.keys()}
    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(dump)} keys)")


if __name__ == "__main__":
    main()
