"""Example: use the service layer directly (no Flask).

Prints the daily history, optionally filtered by the name given as first argument.
"""

import importlib
import sys

from config import get_settings_module

from src.pointage_system.pointage_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    name_filter = sys.argv[1] if len(sys.argv) > 1 else None
    for record in container.history_service.build_history(name_filter):
        print(record.to_dict())


if __name__ == "__main__":
    main()
