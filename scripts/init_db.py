from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from attendance_tracker.database.bootstrap import apply_schema, seed_demo_data
from attendance_tracker.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the MySQL schema for the attendance tracker.")
    parser.add_argument("--seed", action="store_true", help="also insert the demo users and records")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(config)

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    if args.seed:
        seed_demo_data(conn)

    print(f"OK: schema ready -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
