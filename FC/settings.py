# FC/FC/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/FC/settings.py
# Назначение: глобальные настройки проекта Django + безопасная интеграция django-debug-toolbar
# Принципы: всё чувствительное — из .env, тулбар только при DEBUG
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения и работы с ОС
import socket             # модуль нужен для вычисления INTERNAL_IPS (Docker/WSL кейсы)
from dotenv import load_dotenv  # загрузка значений из .env

# Назначаем кастомный обработчик 403 на функцию из приложения cards
handler403 = "cards.views.custom_permission_denied"

# BASE_DIR — корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Если ключ не найден, сразу падаем с понятной ошибкой — без него запуск небезопасен
if not SECRET_KEY:
    raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")

# Флаг режима разработки. В продакшене должен быть False.
DEBUG = os.getenv("DEBUG", "1") == "1"

# Список разрешённых хостов через запятую. В Dev можно оставить пустым.
ALLOWED_HOSTS: list[str] = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.admin",            # админка Django
    "django.contrib.auth",             # система аутентификации
    "django.contrib.contenttypes",     # контент-тайпы (связаны с моделями)
    "django.contrib.sessions",         # сессии
    "django.contrib.messages",         # сообщения (flash-сообщения)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF — API фреймворк
    "rest_framework.authtoken",        # токены для API
    "allusers",                        # приложение с кастомной моделью пользователя
    "cards",                           # наборы карточек и задачи генерации
    "django_cleanup.apps.CleanupConfig",  # django-cleanup (удаление файлов-исходников)
    # "debug_toolbar" — подключим ниже условно, чтобы в проде не торчал
]

# Опциональный флажок для быстрой деактивации тулбара даже при DEBUG=True
ENABLE_DEBUG_TOOLBAR = os.getenv("ENABLE_DEBUG_TOOLBAR", "1") == "1"

# Подключим debug_toolbar только в режиме разработки и если не отключён переменной
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ["debug_toolbar"]  # добавляем приложение тулбара

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.contrib.sessions.middleware.SessionMiddleware", # поддержка сессий
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.csrf.CsrfViewMiddleware",            # защита от CSRF
    "django.contrib.auth.middleware.AuthenticationMiddleware",  # аутентификация пользователя
    "django.contrib.messages.middleware.MessageMiddleware",     # флеш-сообщения
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# Если тулбар включён — вставляем его middleware сразу после SecurityMiddleware
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    _dt_mw = "debug_toolbar.middleware.DebugToolbarMiddleware"  # название middleware тулбара
    sec_idx = MIDDLEWARE.index("django.middleware.security.SecurityMiddleware")
    MIDDLEWARE.insert(sec_idx + 1, _dt_mw)  # вставляем на нужную позицию

# ── Пользовательская модель пользователя и redirect’ы ────────────────────────

AUTH_USER_MODEL = "allusers.User"     # указываем кастомную модель пользователя

LOGIN_URL = "allusers:login"          # страница логина
LOGIN_REDIRECT_URL = "cards:task_list"  # куда отправлять после логина
LOGOUT_REDIRECT_URL = "cards:home"    # куда отправлять после логаута

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "FC.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст
                "django.contrib.auth.context_processors.auth", # добавляет user/permissions
                "django.contrib.messages.context_processors.messages",  # для messages
            ],
        },
    },
]

WSGI_APPLICATION = "FC.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# Сейчас SQLite для разработки; в проде переключитесь на PostgreSQL.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
        "CONN_MAX_AGE": 60,                        # удерживаем коннект (секунды)
    }
}

# ── Валидаторы паролей ──────────────────────────────────────────────────────

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},  # проверка на похожесть
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},            # минимальная длина
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},           # запрет частых паролей
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},          # запрет чисто цифровых
]

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"       # язык интерфейса
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в БД в UTC (рекомендовано)

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики
STATICFILES_DIRS = [BASE_DIR / "static"]  # папка со статикой проекта

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── Пагинация списков ───────────────────────────────────────────────────────
TASKS_PAGE_SIZE = int(os.getenv("TASKS_PAGE_SIZE", "10"))  # наборов на странице «Мои карточки» и limit API по умолчанию

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",  # из браузера
        "rest_framework.authentication.TokenAuthentication",    # из фронтенда/скриптов
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",  # задачи личные — только для своих
    ],
}

# ── Медиа (исходные файлы задач и работа django-cleanup) ─────────────────────
MEDIA_URL = "/media/"      # URL-префикс для медиа
MEDIA_ROOT = BASE_DIR / "media"  # директория хранения медиафайлов

# ── Логирование ─────────────────────────────────────────────────────────────
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
        "cards": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "allusers": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}

# ── Django Debug Toolbar: INTERNAL_IPS и конфигурация ───────────────────────

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    # INTERNAL_IPS определяет, с каких IP показывать тулбар.
    INTERNAL_IPS = ["127.0.0.1", "localhost", "::1"]  # базовые локальные значения

    # Для Docker/WSL — вычисляем подсеть и подставляем *.1
    try:
        hostname, _, ips = socket.gethostbyname_ex(socket.gethostname())  # получаем список IP
        INTERNAL_IPS += [ip[:-1] + "1" for ip in ips if "." in ip]        # 172.17.0.X -> 172.17.0.1
    except OSError:
        pass  # если не получилось — остаёмся на локальных адресах

    # Уберём дубликаты, сохраняя порядок
    INTERNAL_IPS = list(dict.fromkeys(INTERNAL_IPS))

    # Базовая конфигурация тулбара: панели свёрнуты
    DEBUG_TOOLBAR_CONFIG = {
        "SHOW_COLLAPSED": True,                         # панели свёрнуты по умолчанию
        "RESULTS_CACHE_SIZE": 50,                       # кэш последних результатов
        "ROOT_TAG_EXTRA_ATTRS": 'style="z-index:9999"', # перекрыть фиксированные хедеры
    }
