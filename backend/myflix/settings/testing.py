"""
Test settings for myFlix

Fast, isolated settings used by the pytest suite.
"""

from .base import *

DEBUG = False

SECRET_KEY = "myflix-test-secret-key-with-enough-length-for-hs256"
SIMPLE_JWT["SIGNING_KEY"] = SECRET_KEY

ALLOWED_HOSTS = ["testserver", "localhost"]

# ===========================
# DATABASE
# ===========================
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# ===========================
# PASSWORD HASHING
# ===========================
# Fast hasher so the suite does not spend its time in PBKDF2
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# ===========================
# LOGGING
# ===========================
LOGGING["loggers"]["apps"]["level"] = "CRITICAL"
LOGGING["loggers"]["core"]["level"] = "CRITICAL"
