from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from clinic_payroll.container import build_store
from clinic_payroll.storage.bootstrap import apply_schema, ensure_default_settings
from clinic_payroll.storage.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    store = build_store(backend="mysql", db_config=db_config)
    seeded = ensure_default_settings(store)

    print(
        f"OK: kv_store ready -> {DBConfig.from_dict(db_config).describe()} "
        f"(default settings {'seeded' if seeded else 'already present'})"
    )


if __name__ == "__main__":
    main()
