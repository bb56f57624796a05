from flask import Flask
from dotenv import load_dotenv
import logging

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from errors import BookingError  # noqa: E402
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from utils import fail  # noqa: E402
from werkzeug.exceptions import HTTPException  # noqa: E402

logger = logging.getLogger(__name__)


def create_app(config_object=Config) -> Flask:
    """Application factory for the booking service."""

    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False  # ответы в порядке полей: code, message, data

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    # токен приходит в каждом запросе, cookie-сессия не нужна
    login_manager.session_protection = None

    # blueprints
    from modules.accounts import bp as accounts_bp
    from modules.locations import bp as locations_bp
    from modules.reservations import bp as reservations_bp

    app.register_blueprint(accounts_bp)
    app.register_blueprint(locations_bp)
    app.register_blueprint(reservations_bp)

    register_error_handlers(app)

    # DB: ошибка здесь должна останавливать старт
    with app.app_context():
        # Важно: модели должны быть импортированы до create_all()
        import models as account_models  # noqa: F401
        from modules.locations import models as locations_models  # noqa: F401
        from modules.reservations import models as reservations_models  # noqa: F401

        db.create_all()
        logger.info("Booking service ready (database: %s)", db.engine.url.render_as_string(hide_password=True))

    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BookingError)
    def handle_booking_error(exc: BookingError):
        logger.warning("%s: %s", exc.__class__.__name__, exc.message)
        return fail(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        # детали не отдаём клиенту
        logger.exception("Unhandled application error", exc_info=exc)
        return {"code": 1, "message": "internal error"}, 500


if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"])
