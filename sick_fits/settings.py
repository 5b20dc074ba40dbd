"""
Django settings for the sick_fits project.

Everything environment specific is read from os.environ; a ``variables.env``
file next to manage.py is loaded first when it exists.
"""
import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / "variables.env")


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes", "on")


APP_SECRET = os.environ.get("APP_SECRET", "sick-fits-insecure-development-secret")
SECRET_KEY = APP_SECRET

DEBUG = env_bool("DEBUG", True)

ALLOWED_HOSTS = [h.strip() for h in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:7777")

INSTALLED_APPS = [
    "daphne",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "django_filters",
    "drf_spectacular",
    "channels",
    "user",
    "item",
    "cart",
    "order",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "sick_fits.middleware.jwt_cookie_middleware.SessionTokenMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "sick_fits.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "sick_fits.wsgi.application"
ASGI_APPLICATION = "sick_fits.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

CHANNEL_LAYERS = {
    "default": {"BACKEND": "channels.layers.InMemoryChannelLayer"},
}

AUTH_USER_MODEL = "user.User"

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---- CORS: the storefront talks to us with credentials (cookies) ----
CORS_ALLOWED_ORIGINS = [FRONTEND_URL]
CORS_ALLOW_CREDENTIALS = True

# ---- REST framework ----
REST_FRAMEWORK = {
    # identity comes from SessionTokenMiddleware; no session/CSRF auth
    "DEFAULT_AUTHENTICATION_CLASSES": ["user.authentication.SessionTokenAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "sick_fits.exceptions.exception_handler",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Sick Fits API",
    "DESCRIPTION": "Storefront items, accounts, cart and checkout.",
    "VERSION": "1.0.0",
}

# ---- session token ----
SESSION_TOKEN_COOKIE = os.environ.get("SESSION_TOKEN_COOKIE", "token")
SESSION_TOKEN_LIFETIME_DAYS = int(os.environ.get("SESSION_TOKEN_LIFETIME_DAYS", "365"))
SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", False)

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(days=SESSION_TOKEN_LIFETIME_DAYS),
    "ALGORITHM": "HS256",
    "SIGNING_KEY": APP_SECRET,
    "USER_ID_FIELD": "id",
    "USER_ID_CLAIM": "userId",
}

RESET_TOKEN_LIFETIME_MINUTES = int(os.environ.get("RESET_TOKEN_LIFETIME_MINUTES", "60"))

# ---- mail ----
EMAIL_BACKEND = os.environ.get("EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend")
EMAIL_HOST = os.environ.get("MAIL_HOST", "localhost")
EMAIL_PORT = int(os.environ.get("MAIL_PORT", "25"))
EMAIL_HOST_USER = os.environ.get("MAIL_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("MAIL_PASS", "")
DEFAULT_FROM_EMAIL = os.environ.get("DEFAULT_FROM_EMAIL", "no-reply@sickfits.local")

# ---- payments ----
RAZORPAY_KEY_ID = os.environ.get("RAZORPAY_KEY_ID", "")
RAZORPAY_KEY_SECRET = os.environ.get("RAZORPAY_KEY_SECRET", "")
PAYMENT_CURRENCY = os.environ.get("PAYMENT_CURRENCY", "INR")

# ---- catalogue ----
ITEMS_PER_PAGE = int(os.environ.get("ITEMS_PER_PAGE", "4"))
SEARCH_DEBOUNCE_SECONDS = float(os.environ.get("SEARCH_DEBOUNCE_SECONDS", "0.35"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {
        "handlers": ["console"],
        "level": os.environ.get("LOG_LEVEL", "INFO"),
    },
}
