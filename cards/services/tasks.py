# FC/cards/services/tasks.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

from django.db.models import Count, Q

from cards.models import Question, QuizGenerationTask
from .pagination import total_pages, visible_pages
from .validation import PaginationParams

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total_items: int
    total_pages: int

    def as_dict(self) -> Dict[str, int]:
        # ключи в camelCase — так их ждёт фронтенд
        return {
            "page": self.page,
            "limit": self.limit,
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
        }

    @property
    def pages(self) -> List[Optional[int]]:
        return visible_pages(self.page, self.total_pages)


@dataclass
class PaginatedResult(Generic[T]):
    data: List[T] = field(default_factory=list)
    meta: PaginationMeta = field(default_factory=lambda: PaginationMeta(1, 10, 0, 0))


def tasks_for_user(user):
    """Живые задачи пользователя (новые сверху) с числом вопросов."""
    return (QuizGenerationTask.objects
            .filter(user=user)
            .annotate(questions_count=Count("questions", filter=Q(questions__deleted_at__isnull=True)))
            .order_by("-created_at", "-id"))


def paginate(qs, params: PaginationParams) -> PaginatedResult:
    """Срез queryset по ``params`` и метаданные пагинации.

    Страница за пределами списка даёт пустые ``data`` при корректных ``meta``.
    """
    total_items = qs.count()
    data = list(qs[params.offset:params.offset + params.limit])
    meta = PaginationMeta(
        page=params.page,
        limit=params.limit,
        total_items=total_items,
        total_pages=total_pages(total_items, params.limit),
    )
    return PaginatedResult(data=data, meta=meta)


def fetch_tasks_for_user(user, params: PaginationParams) -> PaginatedResult[QuizGenerationTask]:
    """Страница задач пользователя (новые сверху)."""
    result = paginate(tasks_for_user(user), params)
    logger.debug("tasks page %s/%s for user=%s: %s items",
                 result.meta.page, result.meta.total_pages, user.pk, len(result.data))
    return result


def fetch_questions_for_task(task: QuizGenerationTask, params: PaginationParams) -> PaginatedResult[Question]:
    """Страница вопросов задачи вместе с вариантами ответа."""
    qs = task.questions.prefetch_related("answers").order_by("created_at", "id")
    return paginate(qs, params)
