import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("INVITAPP_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(name, default=None):
    """Environment variable wins over env.yaml, which wins over the default."""
    if name in os.environ:
        return os.environ[name]
    return data.get(name, default)


def _get_list(name, default):
    value = _get(name, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


def _get_bool(name, default):
    value = _get(name, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./invitapp.db")
    CREATE_TABLES = _get_bool("CREATE_TABLES", True)
    API_PREFIX = _get("API_PREFIX", "/api/v1")
    API_PORT = int(_get("API_PORT", 4000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get_list("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _get_bool("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_DAYS = int(_get("JWT_EXPIRES_DAYS", 7))
    # Object storage; leaving bucket or region empty disables uploads
    S3_BUCKET = _get("S3_BUCKET", "")
    S3_REGION = _get("S3_REGION", "")
    AWS_ACCESS_KEY_ID = _get("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY = _get("AWS_SECRET_ACCESS_KEY", "")
    S3_KEY_PREFIX = _get("S3_KEY_PREFIX", "invitations")
    PRESIGN_EXPIRES_SECONDS = int(_get("PRESIGN_EXPIRES_SECONDS", 3600))
    UPLOAD_TMP_DIR = _get("UPLOAD_TMP_DIR", "") or None
    # Multipart part limits for server-side uploads (Starlette defaults to 1000 files)
    UPLOAD_MAX_FILES = int(_get("UPLOAD_MAX_FILES", 100000))
    UPLOAD_MAX_FIELDS = int(_get("UPLOAD_MAX_FIELDS", 1000))
    PUBLIC_BASE_URL = _get("PUBLIC_BASE_URL", "http://localhost:5173")
    EVENT_TIMEZONE = _get("EVENT_TIMEZONE", "UTC")
