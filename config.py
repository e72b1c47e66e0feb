from dotenv import load_dotenv
import os

load_dotenv()


def _engine_options(uri):
    if not uri or not uri.startswith("postgresql"):
        return {"pool_pre_ping": True}

    return {
        # Pool settings for idle connection drops on hosted PostgreSQL
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': int(os.getenv("DB_POOL_SIZE", 5)),
        'max_overflow': int(os.getenv("DB_MAX_OVERFLOW", 10)),
        'pool_timeout': 30,

        'connect_args': {
            'sslmode': os.getenv("DB_SSLMODE", "require"),
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///mess.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", 12))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # "actual" buckets bookings by creation day, "estimate" spreads the total with jitter
    ATTENDANCE_TRENDS_MODE = os.getenv("ATTENDANCE_TRENDS_MODE", "actual")
    DEFAULT_MEAL_IMAGE = os.getenv(
        "DEFAULT_MEAL_IMAGE",
        "https://eduauraapublic.s3.ap-south-1.amazonaws.com/webassets/images/blogs/indian-food-nutrition.jpg",
    )

    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ATTENDANCE_TRENDS_MODE = "actual"
