from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from academic_portal.config import get_settings_module
from academic_portal.database.bootstrap import apply_schema, ensure_default_admin, list_tables
from academic_portal.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn)
    created = ensure_default_admin(conn, password=settings.DEFAULT_ADMIN_PASSWORD)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {conn.config.describe()} (tables={len(tables)}, admin_created={created})")


if __name__ == "__main__":
    main()
