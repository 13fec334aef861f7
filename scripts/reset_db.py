"""Drop every portal table and create them again (all data is lost)."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from academic_portal.config import get_settings_module
from academic_portal.database.bootstrap import apply_schema, drop_all_tables, ensure_default_admin
from academic_portal.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    drop_all_tables(conn)
    apply_schema(conn)
    ensure_default_admin(conn, password=settings.DEFAULT_ADMIN_PASSWORD)
    print(f"OK: Database reset -> {conn.config.describe()}")


if __name__ == "__main__":
    main()
