# FC/cards/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/cards/api_urls.py
# Назначение: маршруты DRF (router) для API задач
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include                           # функции маршрутизации
from rest_framework.routers import DefaultRouter                # роутер DRF
from .api_views import QuizGenerationTaskViewSet                # ViewSet задач

router = DefaultRouter()                                        # создаём роутер
router.register(r"tasks", QuizGenerationTaskViewSet, basename="api-tasks")  # задачи генерации

urlpatterns = [
    path("", include(router.urls)),  # подключаем все ViewSet’ы
]
