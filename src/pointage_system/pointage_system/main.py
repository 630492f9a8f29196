from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

from .container import Container, build_container
from .agents.controller import register as register_agents
from .auth.controller import register as register_auth
from .presences.controller import register as register_presences

logger = logging.getLogger("pointage_system")

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            admin_username=getattr(settings, "ADMIN_USERNAME", "admin"),
            admin_password=getattr(settings, "ADMIN_PASSWORD", "1234"),
            arrival_threshold=getattr(settings, "ARRIVAL_THRESHOLD", None),
            departure_reference=getattr(settings, "DEPARTURE_REFERENCE", None),
        )

    register_auth(app, container)
    register_agents(app, container)
    register_presences(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return "Page non trouvée", 404

    return app


def run() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    app = create_app()
    port = int(getattr(settings, "PORT", 3000))
    logger.info("MULYKAP Pointage sur http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
