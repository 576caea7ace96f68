"""
Development settings for myFlix

Inherits from base.py and adds development-specific configurations
"""

from decouple import Csv, config

from .base import *

# ===========================
# DEBUG SETTINGS
# ===========================
DEBUG = config("DEBUG", default=True, cast=bool)

# ===========================
# ALLOWED HOSTS
# ===========================
ALLOWED_HOSTS = config(
    "ALLOWED_HOSTS", default="localhost,127.0.0.1,0.0.0.0", cast=Csv()
)

# Django test client
ALLOWED_HOSTS.append("testserver")

# ===========================
# CORS SETTINGS - DEVELOPMENT
# ===========================
# Allow all origins in development for easier testing
CORS_ALLOW_ALL_ORIGINS = config("CORS_ALLOW_ALL_ORIGINS", default=True, cast=bool)

# ===========================
# LOGGING FOR DEBUGGING
# ===========================
LOGGING["loggers"]["corsheaders"] = {
    "handlers": ["console"],
    "level": "DEBUG",
    "propagate": False,
}
LOGGING["loggers"]["django.request"] = {
    "handlers": ["console"],
    "level": "DEBUG",
    "propagate": False,
}
LOGGING["loggers"]["apps"]["level"] = config("LOG_LEVEL", default="DEBUG")
LOGGING["loggers"]["core"]["level"] = config("LOG_LEVEL", default="DEBUG")
