from .base import *
import os

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬 개발: DB_NAME 미설정 시 sqlite 파일로 대체
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

INTERNAL_IPS = [
    "127.0.0.1",
]

LOGGING["root"]["level"] = os.getenv("LOG_LEVEL", "DEBUG")
