import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("GREPPER_SECRET_KEY", "grepper-dev-only-secret")
DEBUG = os.environ.get("GREPPER_DEBUG", "0") == "1"
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

INSTALLED_APPS = [
    "matching",
]
MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]
ROOT_URLCONF = "grepper.urls"

TEMPLATES = []

WSGI_APPLICATION = "grepper.wsgi.application"

# nothing is persisted, the engine works on in-memory text
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

GREPPER = {
    "SEARCH_LIMIT": 200,
    "ENCODING": "utf-8",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[{levelname}] {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "matching": {
            "handlers": ["console"],
            "level": os.environ.get("GREPPER_LOG_LEVEL", "WARNING"),
        },
    },
}
