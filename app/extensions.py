from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def shutdown_store(app):
    """Dispose the engine's connection pool. Safe to call more than once."""
    with app.app_context():
        db.engine.dispose()
    app.logger.info("Database connection pool disposed")
