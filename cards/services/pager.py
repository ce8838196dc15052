# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/cards/services/pager.py
# Назначение: представление окна пагинации в двух режимах:
#   - ссылки (серверный рендер, ?page=N),
#   - колбэк (интерактивный выбор страницы без перезагрузки),
#   а также постраничная нарезка списка в памяти (вопросы карточек).
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Mapping, Optional, Sequence, TypeVar
from urllib.parse import urlencode

from .pagination import ELLIPSIS, total_pages, visible_pages

T = TypeVar("T")

PageCallback = Callable[[int], None]


@dataclass(frozen=True)
class PageLink:
    """Один элемент панели: номер страницы, «…», «назад» или «вперёд»."""
    label: str
    page: Optional[int] = None      # None — элемент некликабельный
    url: str = ""
    is_active: bool = False
    is_ellipsis: bool = False
    is_disabled: bool = False


def page_url(base_path: str, page: int, page_param: str = "page",
             extra: Optional[Mapping[str, object]] = None) -> str:
    """Ссылка на страницу: ``{base_path}?{page_param}={page}``.

    ``extra`` — прочие параметры запроса (например, ``per``), которые должны
    пережить переход на другую страницу.
    """
    url = f"{base_path}?{page_param}={page}"
    if extra:
        url += "&" + urlencode(extra)
    return url


def build_page_links(current: int, total: int, base_path: str,
                     page_param: str = "page",
                     extra: Optional[Mapping[str, object]] = None) -> List[PageLink]:
    """Режим ссылок: «назад», номера/«…», «вперёд».

    При ``total <= 1`` панель не нужна — возвращаем пустой список.
    """
    if total <= 1:
        return []

    items: List[PageLink] = []

    # «назад» — неактивна на первой странице
    if current > 1:
        items.append(PageLink("«", current - 1, page_url(base_path, current - 1, page_param, extra)))
    else:
        items.append(PageLink("«", is_disabled=True))

    for marker in visible_pages(current, total):
        if marker is ELLIPSIS:
            items.append(PageLink("…", is_ellipsis=True))
        else:
            items.append(PageLink(
                str(marker), marker, page_url(base_path, marker, page_param, extra),
                is_active=marker == current,
            ))

    # «вперёд» — неактивна на последней странице
    if current < total:
        items.append(PageLink("»", current + 1, page_url(base_path, current + 1, page_param, extra)))
    else:
        items.append(PageLink("»", is_disabled=True))
    return items


class CallbackPager:
    """Интерактивный режим: выбор страницы вызывает ``on_page_change(page)``.

    «…» не выбирается, повторный выбор текущей страницы колбэк не вызывает.
    """

    def __init__(self, current: int, total: int, on_page_change: PageCallback):
        self.current = current
        self.total = total
        self.on_page_change = on_page_change

    @property
    def markers(self) -> List[Optional[int]]:
        return visible_pages(self.current, self.total)

    @property
    def visible(self) -> bool:
        return self.total > 1

    @property
    def has_previous(self) -> bool:
        return self.current > 1

    @property
    def has_next(self) -> bool:
        return self.current < self.total

    def select(self, marker: Optional[int]) -> bool:
        """Обработать клик по маркеру. Возвращает True, если колбэк вызван."""
        if marker is ELLIPSIS or marker == self.current:
            return False
        if not 1 <= marker <= self.total:
            return False
        self.on_page_change(marker)
        self.current = marker
        return True

    def previous(self) -> bool:
        return self.has_previous and self.select(self.current - 1)

    def next(self) -> bool:
        return self.has_next and self.select(self.current + 1)


class ItemPager(Generic[T]):
    """Постраничная нарезка списка в памяти (например, вопросов задачи)."""

    def __init__(self, items: Sequence[T], per_page: int,
                 on_page_change: Optional[PageCallback] = None, page: int = 1):
        self.items = items
        self.per_page = max(1, per_page)
        self.on_page_change = on_page_change
        self.current_page = max(1, page)

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_items, self.per_page)

    @property
    def index_of_first_item(self) -> int:
        return (self.current_page - 1) * self.per_page

    @property
    def index_of_last_item(self) -> int:
        return self.current_page * self.per_page

    @property
    def current_items(self) -> List[T]:
        return list(self.items[self.index_of_first_item:self.index_of_last_item])

    @property
    def markers(self) -> List[Optional[int]]:
        return visible_pages(self.current_page, self.total_pages)

    def navigate_to_page(self, page: int) -> None:
        self.current_page = page
        if self.on_page_change is not None:
            self.on_page_change(page)

    def next_page(self) -> None:
        if self.current_page < self.total_pages:
            self.navigate_to_page(self.current_page + 1)

    def previous_page(self) -> None:
        if self.current_page > 1:
            self.navigate_to_page(self.current_page - 1)

    def handle_item_added(self) -> None:
        # вызывается до того, как новый элемент попал в items:
        # если страницы заполнены ровно, новый элемент откроет следующую
        if self.total_items % self.per_page == 0:
            self.navigate_to_page(total_pages(self.total_items + 1, self.per_page))

    def as_callback_pager(self) -> CallbackPager:
        return CallbackPager(self.current_page, self.total_pages, self.navigate_to_page)
