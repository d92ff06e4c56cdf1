from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from logging_config import configure_logging  # noqa: E402


def create_app(config_overrides=None) -> Flask:
    """Application factory for the staff application site."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = "staff.login"
    login_manager.login_message = "You must be logged in to submit an application."
    login_manager.login_message_category = "danger"

    # blueprints
    from modules.staff import bp as staff_bp

    app.register_blueprint(staff_bp)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401

        db.create_all()

    # --- template helpers ---
    from permissions import can_apply, can_login, can_logout, can_register, can_review
    from utils import nl2br, status_badge

    app.add_template_filter(status_badge)
    app.add_template_filter(nl2br)

    @app.context_processor
    def inject_nav():
        return dict(
            can_register=can_register,
            can_login=can_login,
            can_apply=can_apply,
            can_review=can_review,
            can_logout=can_logout,
        )

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
