from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db

def home_index():
    return jsonify({
        "message": "Mess booking API",
    })

def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError:
        current_app.logger.exception("Database health check failed")
        db_status = "unhealthy"

    return jsonify({
        "status": "online",
        "database": db_status,
    }), 200 if db_status == "healthy" else 503

def view_entry(name):
    return jsonify({"view": name})
