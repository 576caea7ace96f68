"""
Base settings for the myFlix project.

This file contains settings that are SHARED across all environments.
Environment-specific settings go in development.py, production.py, testing.py
"""

from datetime import timedelta
from pathlib import Path

import dj_database_url
from decouple import Csv, config

# ================================================================
# PATHS & DIRECTORIES
# ================================================================
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ================================================================
# SECURITY SETTINGS
# ================================================================
SECRET_KEY = config(
    "SECRET_KEY", default="django-insecure-myflix-local-development-key-change-me"
)

DEBUG = config("DEBUG", default=False, cast=bool)

ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

# ================================================================
# CUSTOM USER MODEL
# ================================================================
AUTH_USER_MODEL = "authentication.User"

# ================================================================
# APPLICATION DEFINITION
# ================================================================
# Django core apps
DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

# Third-party apps
THIRD_PARTY_APPS = [
    "rest_framework",
    "corsheaders",
    "drf_spectacular",
]

# Local apps
LOCAL_APPS = [
    "core",
    "apps.authentication",
    "apps.movies",
    "apps.lists",
    "apps.users",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# ================================================================
# CORS SETTINGS (Cross-Origin Resource Sharing)
# ================================================================
# Web clients the API was built for
CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS",
    default=(
        "http://localhost:8080,"
        "http://localhost:1234,"
        "https://cf-myflix-react-client.netlify.app,"
        "https://cf-myflix-react.jorgecortes.dev"
    ),
    cast=Csv(),
)

CORS_ALLOW_METHODS = [
    "DELETE",
    "GET",
    "OPTIONS",
    "POST",
    "PUT",
]

CORS_ALLOW_HEADERS = [
    "accept",
    "authorization",
    "content-type",
    "user-agent",
    "x-requested-with",
]

# ================================================================
# MIDDLEWARE CONFIGURATION
# ================================================================

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ================================================================
# REST FRAMEWORK CONFIGURATION
# ================================================================
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.authentication.BearerTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
}

# ================================================================
# JWT CONFIGURATION
# ================================================================
JWT_LIFETIME_DAYS = config("JWT_LIFETIME_DAYS", default=7, cast=int)

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(days=JWT_LIFETIME_DAYS),
    "UPDATE_LAST_LOGIN": False,
    "ALGORITHM": "HS256",
    "SIGNING_KEY": config("JWT_SECRET", default=SECRET_KEY),
    "VERIFYING_KEY": None,
    "AUTH_HEADER_TYPES": ("Bearer",),
    "AUTH_HEADER_NAME": "HTTP_AUTHORIZATION",
    # The token subject is the account email
    "USER_ID_FIELD": "email",
    "USER_ID_CLAIM": "sub",
    "USER_AUTHENTICATION_RULE": (
        "rest_framework_simplejwt.authentication.default_user_authentication_rule"
    ),
}

# ================================================================
# URL CONFIGURATION
# ================================================================
ROOT_URLCONF = "myflix.urls"

# Routes have no trailing slash
APPEND_SLASH = False

# ================================================================
# TEMPLATE CONFIGURATION
# ================================================================
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# ================================================================
# WSGI CONFIGURATION
# ================================================================
WSGI_APPLICATION = "myflix.wsgi.application"

# ================================================================
# DATABASE CONFIGURATION
# ================================================================
DATABASE_URL = config("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}")

DATABASES = {
    "default": dj_database_url.parse(
        DATABASE_URL,
        conn_max_age=600,
        conn_health_checks=True,
    )
}

# ================================================================
# INTERNATIONALIZATION
# ================================================================
LANGUAGE_CODE = config("LANGUAGE_CODE", default="en-us")
TIME_ZONE = config("TIME_ZONE", default="UTC")
USE_I18N = config("USE_I18N", default=True, cast=bool)
USE_TZ = config("USE_TZ", default=True, cast=bool)

# ================================================================
# STATIC FILES CONFIGURATION
# ================================================================
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ================================================================
# DEFAULT PRIMARY KEY FIELD TYPE
# ================================================================
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ================================================================
# LOGGING
# ================================================================
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "core": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

# ================================================================
# API DOCUMENTATION CONFIGURATION (DRF-Spectacular)
# ================================================================
SPECTACULAR_SETTINGS = {
    "TITLE": "myFlix API",
    "DESCRIPTION": """
    Movie catalog API for the myFlix clients.

    Features:
    - Movie catalog with embedded genre and director documents
    - User registration and account management
    - Favorites and watch-list per user
    - Bearer token authentication (send `Authorization: Bearer <token>`)

    """,
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "LICENSE": {
        "name": "MIT License",
    },
    # API Configuration
    "COMPONENT_SPLIT_REQUEST": True,
    "COMPONENT_NO_READ_ONLY_REQUIRED": True,
    # Authentication
    "SERVE_AUTHENTICATION": [],
    "SERVE_PERMISSIONS": ["rest_framework.permissions.AllowAny"],
    "ENUM_ADD_EXPLICIT_BLANK_NULL_CHOICE": False,
    "DISABLE_AUTO_TAGS": True,
    "TAGS": [
        {"name": "Auth", "description": "Credential exchange for a bearer token"},
        {"name": "Movie", "description": "Movie catalog"},
        {"name": "Genre", "description": "Genres embedded in movies"},
        {"name": "Director", "description": "Directors embedded in movies"},
        {"name": "User", "description": "User accounts"},
        {"name": "Lists", "description": "Favorites and watch-list"},
    ],
    # UI Customization
    "SWAGGER_UI_SETTINGS": {
        "deepLinking": True,
        "persistAuthorization": True,
        "displayOperationId": False,
        "displayRequestDuration": True,
        "filter": True,
        "tryItOutEnabled": True,
    },
    "REDOC_UI_SETTINGS": {
        "hideDownloadButton": False,
    },
    # Security
    "SERVE_PUBLIC": True,
    "DISABLE_ERRORS_AND_WARNINGS": False,
}
