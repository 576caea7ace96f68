"""
Production settings for myFlix
"""

import dj_database_url
from decouple import Csv, config

from .base import *

# ===========================
# DEBUG & SECURITY
# ===========================
DEBUG = config("DEBUG", default=False, cast=bool)
SECRET_KEY = config("SECRET_KEY")

# Signing key follows the mandatory production SECRET_KEY
SIMPLE_JWT["SIGNING_KEY"] = config("JWT_SECRET", default=SECRET_KEY)

# ===========================
# ALLOWED HOSTS
# ===========================
ALLOWED_HOSTS = config("ALLOWED_HOSTS", cast=Csv())

# ===========================
# DATABASE
# ===========================
DATABASES = {
    "default": dj_database_url.parse(
        config("DATABASE_URL"),
        conn_max_age=600,
        conn_health_checks=True,
    )
}

# ===========================
# STATIC FILES - WHITENOISE
# ===========================
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"
    },
}

# ===========================
# CORS
# ===========================
CORS_ALLOW_ALL_ORIGINS = False

# ===========================
# HTTPS
# ===========================
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=False, cast=bool)
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# ===========================
# LOGGING
# ===========================
LOGGING["root"]["level"] = "INFO"
