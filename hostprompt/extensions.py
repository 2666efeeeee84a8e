# hostprompt/extensions.py
from __future__ import annotations

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# --- SQLAlchemy -------------------------------------------------------------
db = SQLAlchemy()

# --- Flask-Migrate ----------------------------------------------------------
migrate = Migrate()

# --- Flask-Limiter (storage chosen in create_app) ---------------------------
limiter = Limiter(key_func=get_remote_address)

__all__ = ["db", "migrate", "limiter"]
