# apps/api/config/settings/test.py
# pytest-django 전용 설정: in-memory sqlite, 빠른 해셔, 고정 R2 URL

from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

R2_ENDPOINT = "https://r2.test.invalid"
R2_ACCESS_KEY = "test"
R2_SECRET_KEY = "test"
R2_BUCKET = "test-bucket"
R2_PUBLIC_BASE_URL = "https://cdn.test.invalid"

LOGGING["root"]["level"] = "WARNING"
