from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Dict

import click
from flask import Flask, jsonify, g, request

from blogdesk.config import Config
from blogdesk.extensions import (
    db,
    migrate,
    login_manager,
    csrf,
    limiter,
)
from blogdesk.logging_config import configure_logging
from blogdesk.security import apply_security_headers
from blogdesk.models import User, Post  # noqa: F401  ensure models imported for migrations


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    app.permanent_session_lifetime = timedelta(minutes=int(app.config.get("SESSION_LIFETIME_MINUTES", 30)))

    configure_logging()

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    limiter.init_app(app)

    login_manager.login_view = "auth.login"
    login_manager.login_message = "Please log in as an admin to continue."

    # Report on the admin account at startup
    with app.app_context():
        try:
            from blogdesk.utils.admin_setup import ensure_admin_user
            ensure_admin_user()
        except Exception as e:
            app.logger.error(f"Failed to check for admin user: {str(e)}")

    @login_manager.user_loader
    def load_user(user_id: str) -> User | None:
        from blogdesk.repositories.user import get_user_by_id
        return get_user_by_id(int(user_id))

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()

    # Security headers
    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from blogdesk.blueprints.auth import bp as auth_bp
    from blogdesk.blueprints.posts import bp as posts_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(posts_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Error handlers outside the posts pages answer with JSON
    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": str(e)}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify({"error": "unauthorized", "message": str(e)}), 401

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "forbidden", "message": str(e)}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create admin user
    @app.cli.command("create-admin")
    @click.option("--username", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(username: str, password: str) -> None:
        from blogdesk.utils.admin_setup import create_admin_user
        if create_admin_user(username, password) is None:
            click.echo("User already exists")
            return
        click.echo("Admin user created")

    return app
