# PATH: apps/api/config/settings/prod.py
from django.core.exceptions import ImproperlyConfigured

from .base import *
import os

# ==================================================
# PROD MODE
# ==================================================

DEBUG = False

if SECRET_KEY == "dev-secret-key":
    raise RuntimeError("DJANGO_SECRET_KEY must be set in prod.")

# ==================================================
# SECURITY
# ==================================================

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ==================================================
# ALLOWED HOSTS
# ==================================================
# prod에서는 "*" 금지

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if h.strip() and h.strip() != "*"
]

# ==================================================
# CORS (Frontend ↔ API)
# ==================================================

CORS_ALLOW_ALL_ORIGINS = False

CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.environ.get("CORS_ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if o.strip()
]

CORS_ALLOW_CREDENTIALS = True

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

# ==================================================
# R2 가드
# ==================================================

R2_REQUIRED = [
    ("R2_ENDPOINT", R2_ENDPOINT),
    ("R2_ACCESS_KEY", R2_ACCESS_KEY),
    ("R2_SECRET_KEY", R2_SECRET_KEY),
    ("R2_PUBLIC_BASE_URL", R2_PUBLIC_BASE_URL),
]
R2_CONFIG_MISSING = [name for name, value in R2_REQUIRED if not value]
if R2_CONFIG_MISSING:
    raise ImproperlyConfigured(f"Missing R2 settings: {R2_CONFIG_MISSING}")
