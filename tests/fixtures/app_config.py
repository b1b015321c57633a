from config import ApplicationConfig

API = "/api/v1"


class TestConfig(ApplicationConfig):
    """Settings for the integration app: no S3, fixed secret, test database"""

    __test__ = False
    DB_URI = "sqlite+aiosqlite:///./test.db"
    CREATE_TABLES = False
    API_PREFIX = API
    JWT_SECRET = "test-secret"
    JWT_EXPIRES_DAYS = 7
    S3_BUCKET = ""
    S3_REGION = ""
    S3_KEY_PREFIX = "invitations"
    PRESIGN_EXPIRES_SECONDS = 3600
    UPLOAD_TMP_DIR = None
    PUBLIC_BASE_URL = "http://invite.test"
    EVENT_TIMEZONE = "UTC"
    CORS_ORIGINS = ["*"]
