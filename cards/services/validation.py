# FC/cards/services/validation.py
"""Проверка параметров запроса списка задач.

Каждая функция возвращает ``Ok(value)`` или ``Invalid(field, reason)``;
сложные проверки собираются из простых через ``validate_fetch_params``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    field: str
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def as_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


Result = Union[Ok[T], Invalid]


@dataclass(frozen=True)
class PaginationParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def parse_int(field: str, raw: Any, default: int) -> Result[int]:
    """Пустое значение — ``default``; иначе строго целое число."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return Ok(default)
    if isinstance(raw, bool):
        return Invalid(field, "must be an integer")
    if isinstance(raw, int):
        return Ok(raw)
    try:
        return Ok(int(str(raw).strip()))
    except ValueError:
        return Invalid(field, "must be an integer")


def in_range(field: str, minimum: int, maximum: Optional[int] = None) -> Callable[[int], Result[int]]:
    def check(value: int) -> Result[int]:
        if value < minimum:
            return Invalid(field, f"must not be less than {minimum}")
        if maximum is not None and value > maximum:
            return Invalid(field, f"must not be greater than {maximum}")
        return Ok(value)
    return check


def then(result: Result[T], check: Callable[[T], Result[T]]) -> Result[T]:
    return check(result.value) if isinstance(result, Ok) else result


def validate_page(raw: Any) -> Result[int]:
    return then(parse_int("page", raw, DEFAULT_PAGE), in_range("page", 1))


def validate_limit(raw: Any, default: int = DEFAULT_LIMIT) -> Result[int]:
    return then(parse_int("limit", raw, default), in_range("limit", 1, MAX_LIMIT))


def validate_fetch_params(query: Mapping[str, Any],
                          default_limit: int = DEFAULT_LIMIT) -> Result[PaginationParams]:
    page = validate_page(query.get("page"))
    if isinstance(page, Invalid):
        return page
    limit = validate_limit(query.get("limit"), default_limit)
    if isinstance(limit, Invalid):
        return limit
    return Ok(PaginationParams(page=page.value, limit=limit.value))
