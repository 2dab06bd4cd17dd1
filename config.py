import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./mall_access.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 7 * 24 * 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    DEFAULT_PER_PAGE = int(data.get("DEFAULT_PER_PAGE", 20))
    MAX_PER_PAGE = int(data.get("MAX_PER_PAGE", 100))
    DEFAULT_ROLE_COLOR = data.get("DEFAULT_ROLE_COLOR", "#6366f1")
    ACTIVITY_CHART_DAYS = int(data.get("ACTIVITY_CHART_DAYS", 30))
    BOOTSTRAP_ADMIN_EMAIL = data.get("BOOTSTRAP_ADMIN_EMAIL", "")
    BOOTSTRAP_ADMIN_PASSWORD = data.get("BOOTSTRAP_ADMIN_PASSWORD", "")
