# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/cards/api_views.py
# Назначение: DRF-представления (ViewSet) для задач генерации карточек
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging
from collections import OrderedDict
from typing import Any

from django.conf import settings  # TASKS_PAGE_SIZE
from django.shortcuts import get_object_or_404  # 404-хелпер

from rest_framework import mixins, status, viewsets  # базовые классы DRF
from rest_framework.decorators import action  # экшены у ViewSet
from rest_framework.response import Response  # DRF-ответ

from .models import QuizGenerationTask
from .serializers import QuestionSerializer, TaskDetailSerializer, TaskSummarySerializer
from .services.tasks import PaginatedResult, fetch_questions_for_task, fetch_tasks_for_user, tasks_for_user
from .services.validation import Invalid, Result, PaginationParams, validate_fetch_params

logger = logging.getLogger(__name__)


def query_params(request) -> Result[PaginationParams]:
    """?page=&limit= → PaginationParams; limit по умолчанию — TASKS_PAGE_SIZE."""
    return validate_fetch_params(request.query_params, default_limit=settings.TASKS_PAGE_SIZE)


def invalid_response(request, result: Invalid) -> Response:
    logger.info("invalid query %s from user=%s: %s", request.path, request.user.pk, result.as_dict())
    return Response(result.as_dict(), status=status.HTTP_400_BAD_REQUEST)


def paginated_response(result: PaginatedResult, serializer_class) -> Response:
    """Ответ вида {data, meta, pages}: pages — окно номеров для панели (null = «…»)."""
    return Response(OrderedDict([
        ("data", serializer_class(result.data, many=True).data),
        ("meta", result.meta.as_dict()),
        ("pages", result.meta.pages),
    ]))


# ==============================================================================
#                          VIEWSET ДЛЯ ЗАДАЧ ГЕНЕРАЦИИ
# ==============================================================================
class QuizGenerationTaskViewSet(mixins.ListModelMixin,
                                mixins.RetrieveModelMixin,
                                mixins.DestroyModelMixin,
                                viewsets.GenericViewSet):
    """Задачи текущего пользователя: список, деталь, мягкое удаление."""
    serializer_class = TaskSummarySerializer
    pagination_class = None  # страницы режем сами: validate_fetch_params + PaginationMeta

    def get_queryset(self):
        # чужие задачи не видны — на них будет 404
        return tasks_for_user(self.request.user)

    def get_serializer_class(self):
        if self.action == "retrieve":
            return TaskDetailSerializer
        return TaskSummarySerializer

    def list(self, request, *args: Any, **kwargs: Any) -> Response:
        """?page=&limit= → {data, meta, pages}. Страница за концом списка — пустые data."""
        result = query_params(request)
        if isinstance(result, Invalid):
            return invalid_response(request, result)
        return paginated_response(fetch_tasks_for_user(request.user, result.value), TaskSummarySerializer)

    def retrieve(self, request, *args: Any, **kwargs: Any) -> Response:
        task = self.get_object()
        task = (QuizGenerationTask.objects
                .prefetch_related("questions__answers")
                .get(pk=task.pk))
        return Response(TaskDetailSerializer(task).data)

    def perform_destroy(self, instance: QuizGenerationTask) -> None:
        instance.soft_delete()
        logger.info("task %s soft-deleted by user=%s", instance.pk, self.request.user.pk)

    @action(detail=True, methods=["get"])
    def questions(self, request, pk: int | str | None = None) -> Response:
        """Вопросы задачи постранично (?page=&limit=), тот же формат, что у списка."""
        task = get_object_or_404(self.get_queryset(), pk=pk)
        result = query_params(request)
        if isinstance(result, Invalid):
            return invalid_response(request, result)
        return paginated_response(fetch_questions_for_task(task, result.value), QuestionSerializer)
