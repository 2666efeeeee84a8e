# hostprompt/__init__.py
from __future__ import annotations

import logging
import os as _os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import click
import redis
from dotenv import load_dotenv
from flask import Flask
from sqlalchemy import text as _text

# Shared extensions (singletons) live in hostprompt/extensions.py
from hostprompt.extensions import db, limiter, migrate

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _mask_uri(uri: str) -> str:
    """Hide password in logs."""
    if "@" in uri and "://" in uri:
        head, tail = uri.split("://", 1)
        creds, rest = tail.split("@", 1)
        if ":" in creds:
            user, _pwd = creds.split(":", 1)
            return f"{head}://{user}:***@{rest}"
    return uri


def _configure_logging(app: Flask) -> None:
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.INFO)
    stderr_handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    handlers = [stderr_handler]
    log_path = app.config.get("APP_ERROR_LOG")
    if log_path:
        _os.makedirs(_os.path.dirname(log_path) or ".", exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handlers.append(file_handler)

    app.logger.handlers.clear()
    for handler in handlers:
        app.logger.addHandler(handler)
    app.logger.setLevel(logging.INFO)
    app.logger.propagate = False


def _probe_redis(app: Flask, url: str) -> bool:
    if not url or url == "memory://":
        return False
    try:
        client = redis.from_url(url, decode_responses=True, socket_timeout=2)
        client.ping()
        return True
    except (redis.RedisError, ValueError) as e:
        app.logger.warning(f"Redis probe failed: {e}")
        return False


def _init_limiter(app: Flask) -> None:
    preferred = app.config.get("RATELIMIT_STORAGE_URI") or app.config.get("REDIS_URL") or ""
    storage_uri = preferred if _probe_redis(app, preferred) else "memory://"
    app.config["RATELIMIT_STORAGE_URI"] = storage_uri
    app.config.setdefault("RATELIMIT_IN_MEMORY_FALLBACK_ENABLED", True)
    limiter.init_app(app)
    app.logger.info(f"Rate limit storage: {storage_uri}")


def create_app(config_object=None):
    load_dotenv()

    app = Flask(__name__, instance_relative_config=False)
    app.config.from_object(config_object or "hostprompt.config.Config")

    # ---- Optional pyfile overlay -------------------------------------------
    cfg_env = _os.getenv("APP_CONFIG_FILE")
    if cfg_env and Path(cfg_env).exists():
        app.config.from_pyfile(cfg_env)

    # ---- Logging (stderr + rotating file) ----------------------------------
    _configure_logging(app)
    if cfg_env:
        app.logger.info(f"Loaded config from APP_CONFIG_FILE={cfg_env}")

    # ---- DB / Extensions init ----------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    _init_limiter(app)

    from hostprompt import models  # noqa: F401

    app.logger.info(f"Logger initialized. DB: {_mask_uri(app.config['SQLALCHEMY_DATABASE_URI'])}")

    # ---- Monitoring + errors -----------------------------------------------
    from hostprompt.errors import register_error_handlers
    from hostprompt.monitoring import init_sentry

    init_sentry(app)
    register_error_handlers(app)

    # ---- Blueprints --------------------------------------------------------
    from hostprompt.generator import generator_bp
    from hostprompt.library import library_bp
    from hostprompt.properties import properties_bp

    app.register_blueprint(generator_bp)
    app.register_blueprint(properties_bp)
    app.register_blueprint(library_bp)

    # ---- Health ------------------------------------------------------------
    def _db_connected() -> bool:
        try:
            with db.engine.connect() as conn:
                conn.execute(_text("SELECT 1"))
            return True
        except Exception as e:
            app.logger.exception("Database check failed: %s", e)
            return False

    @app.route("/__health__")
    def __health__():
        return "ok", 200

    @app.route("/__dbcheck__")
    def __dbcheck__():
        uri = app.config["SQLALCHEMY_DATABASE_URI"]
        info = {"connected": _db_connected(), "driver": uri.split("://", 1)[0]}
        return {"ok": True, "db": info}, 200

    @app.route("/api/health")
    def api_health():
        from hostprompt import ai_clients

        return {
            "ok": True,
            "database": _db_connected(),
            "ai": ai_clients.ai_available(),
            "provider": ai_clients.provider(),
        }, 200

    # ---- Flask CLI ---------------------------------------------------------
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Tables created.")

    @app.cli.command("seed-demo")
    def seed_demo():
        """Create a demo property for the default user."""
        from hostprompt import storage
        from hostprompt.models import Property

        user_id = int(app.config.get("DEFAULT_USER_ID", 1))
        if Property.query.filter_by(user_id=user_id).first():
            click.echo("Demo data already present.")
            return
        prop = storage.create_property(
            user_id,
            {
                "name": "Seaside Cottage",
                "location": "Cannon Beach, Oregon",
                "bedrooms": 2,
                "bathrooms": 1.5,
                "description": "Two-bedroom cottage a short walk from the beach.",
                "status": "active",
                "amenities": ["WiFi", "Fully equipped kitchen", "Fire pit"],
                "saved_hashtags": ["cannonbeach", "cottagelife"],
            },
        )
        click.echo(f"Created property #{prop.id}.")

    return app
