# FC/FC/settings_test.py
# Настройки для pytest: безопасные значения окружения до загрузки основных настроек.
import os

os.environ.setdefault("KEY_DJ", "test-secret-key-not-for-production")
os.environ["ENABLE_DEBUG_TOOLBAR"] = "0"  # тулбар в тестах не нужен

from .settings import *  # noqa: E402,F401,F403

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]  # быстрее в тестах
MEDIA_ROOT = BASE_DIR / ".test-media"  # noqa: F405
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}
TASKS_PAGE_SIZE = 10  # тесты рассчитаны на стандартный размер страницы
