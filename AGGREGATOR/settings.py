"""
Django settings for AGGREGATOR project.
"""

from pathlib import Path
import os

from dotenv import load_dotenv

# ============
# Chemins
# ============
BASE_DIR = Path(__file__).resolve().parent.parent

# ============
# .env
# ============
load_dotenv(BASE_DIR / ".env")

def env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}

def env_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    if not raw:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]

# ============
# Sécurité & debug
# ============
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-unsafe")
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

# ============
# Apps
# ============
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # 3rd-party
    "rest_framework",
    "django_filters",

    # Apps projet
    "entries",
    "aggregator",
]

# ============
# Middleware
# ============
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ============
# Templates
# ============
ROOT_URLCONF = "AGGREGATOR.urls"

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

WSGI_APPLICATION = "AGGREGATOR.wsgi.application"

# ============
# Base de données
# ============
DB_ENGINE = os.getenv("DB_ENGINE", "django.db.backends.sqlite3")

if DB_ENGINE.endswith("sqlite3"):
    DATABASES = {
        "default": {
            "ENGINE": DB_ENGINE,
            "NAME": os.getenv("DB_NAME", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": DB_ENGINE,
            "NAME": os.getenv("DB_NAME", "AGGREGATOR_DB"),
            "USER": os.getenv("DB_USER", "postgres"),
            "PASSWORD": os.getenv("DB_PASSWORD", ""),
            "HOST": os.getenv("DB_HOST", "localhost"),
            "PORT": os.getenv("DB_PORT", "5432"),
        }
    }

# ============
# Auth
# ============
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
]

LOGIN_URL = "/admin/login/"

# ============
# Internationalisation
# ============
LANGUAGE_CODE = "fr"
TIME_ZONE = os.getenv("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ============
# REST Framework
# ============
REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
    ],
}

# ============
# Logging
# ============
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "aggregator": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
        "entries": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
    },
}

# ============
# Agrégateur
# ============
# Nom du site, utilisé comme identifiant si aucun n'est saisi dans la configuration
SITE_NAME = os.getenv("SITE_NAME", "")

# Clés acceptées par l'API de réception (site central uniquement)
AGGREGATOR_API_PUBLIC_KEY = os.getenv("AGGREGATOR_API_PUBLIC_KEY", "")
AGGREGATOR_API_PRIVATE_KEY = os.getenv("AGGREGATOR_API_PRIVATE_KEY", "")

AGGREGATOR_SIGNATURE_TTL = int(os.getenv("AGGREGATOR_SIGNATURE_TTL", "3600"))
AGGREGATOR_HTTP_TIMEOUT = float(os.getenv("AGGREGATOR_HTTP_TIMEOUT", "60"))
