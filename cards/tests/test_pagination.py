# FC/cards/tests/test_pagination.py
import pytest

from cards.services.pagination import ELLIPSIS, SMALL_PAGES_THRESHOLD, total_pages, visible_pages

E = ELLIPSIS


@pytest.mark.parametrize("current, total, expected", [
    (1, 0, []),                                   # страниц нет совсем
    (1, 1, [1]),
    (3, 5, [1, 2, 3, 4, 5]),                      # до порога — без «…»
    (7, 7, [1, 2, 3, 4, 5, 6, 7]),
    (1, 10, [1, 2, 3, 4, 5, E, 10]),              # расширение у начала
    (5, 10, [1, E, 4, 5, 6, E, 10]),              # окно в середине
    (10, 10, [1, E, 6, 7, 8, 9, 10]),             # расширение у конца
    (6, 20, [1, E, 5, 6, 7, E, 20]),
])
def test_visible_pages_examples(current, total, expected):
    assert visible_pages(current, total) == expected


def test_threshold_is_seven():
    assert SMALL_PAGES_THRESHOLD == 7
    assert E not in visible_pages(4, 7)
    assert E in visible_pages(1, 8)


def test_ellipsis_never_hides_single_page():
    # при current=4 слева скрыта бы была только страница 2 — показываем её
    assert visible_pages(4, 10) == [1, 2, 3, 4, 5, E, 10]
    # при current=7 справа скрыта бы была только страница 9
    assert visible_pages(7, 10) == [1, E, 6, 7, 8, 9, 10]


@pytest.mark.parametrize("current, total", [(-3, 10), (0, 10), (11, 10), (999, 50), (5, -4), (-1, -1)])
def test_out_of_range_input_does_not_raise(current, total):
    pages = visible_pages(current, total)
    if total > 1:
        assert pages[0] == 1 and pages[-1] == total
    else:
        assert pages == []


def test_out_of_range_current_is_clamped():
    assert visible_pages(0, 10) == visible_pages(1, 10)
    assert visible_pages(42, 10) == visible_pages(10, 10)


def test_invariants_hold_for_all_small_inputs():
    for total in range(2, 40):
        for current in range(1, total + 1):
            pages = visible_pages(current, total)
            numbers = [p for p in pages if p is not E]

            assert pages[0] == 1
            assert pages[-1] == total
            assert current in numbers
            # номера строго возрастают
            assert numbers == sorted(set(numbers))
            for i, marker in enumerate(pages):
                if marker is E:
                    # «…» не бывает подряд и прячет минимум две страницы
                    assert pages[i + 1] is not E
                    assert pages[i + 1] - pages[i - 1] > 2


def test_is_pure():
    assert visible_pages(5, 30) == visible_pages(5, 30)
    first = visible_pages(5, 30)
    first.append(99)
    assert visible_pages(5, 30) == [1, E, 4, 5, 6, E, 30]


@pytest.mark.parametrize("items, per_page, expected", [
    (0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (37, 10, 4), (5, 0, 5), (-5, 10, 0),
])
def test_total_pages(items, per_page, expected):
    assert total_pages(items, per_page) == expected
