from .home_routes import home_bp
from .auth_routes import auth_bp
from .meal_routes import meal_bp
from .user_routes import user_bp
from .admin_routes import admin_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(admin_bp)
