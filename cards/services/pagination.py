# FC/cards/services/pagination.py
from __future__ import annotations
from typing import List, Optional

# Маркер пропуска («…») в окне пагинации
ELLIPSIS = None

# До этого числа страниц включительно показываем все номера без «…»
SMALL_PAGES_THRESHOLD = 7

Marker = Optional[int]


def visible_pages(current: int, total: int) -> List[Marker]:
    """Возвращает маркеры для панели пагинации: номера страниц и ``ELLIPSIS``.

    Parameters
    ----------
    current : int
        Текущий номер страницы (1-based). Значение вне ``[1, total]``
        прижимается к границам.
    total : int
        Общее число страниц. Отрицательное считается нулём.

    Returns
    -------
    List[Optional[int]]
        Первая страница, окно вокруг текущей и последняя страница;
        ``None`` на месте скрытых номеров.
    """
    total = max(0, total)
    if total <= 1:
        return list(range(1, total + 1))
    if total <= SMALL_PAGES_THRESHOLD:
        return list(range(1, total + 1))

    current = max(1, min(current, total))

    # окно вокруг текущей страницы, не заходя на первую/последнюю
    start = max(2, current - 1)
    end = min(total - 1, current + 1)
    if current <= 3:
        start, end = 2, min(5, total - 1)
    elif current >= total - 2:
        start, end = max(2, total - 4), total - 1

    # «…» вместо одной-единственной страницы не ставим — показываем её саму
    if start == 3:
        start = 2
    if end == total - 2:
        end = total - 1

    pages: List[Marker] = [1]
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total - 1:
        pages.append(ELLIPSIS)
    pages.append(total)
    return pages


def total_pages(total_items: int, per_page: int) -> int:
    """Число страниц для ``total_items`` элементов по ``per_page`` на странице."""
    per_page = max(1, per_page)
    return -(-max(0, total_items) // per_page)
