# FC/cards/tests/test_pager.py
from cards.services.pager import CallbackPager, ItemPager, build_page_links, page_url


def test_page_url_template():
    assert page_url("/flash-cards/", 3) == "/flash-cards/?page=3"
    assert page_url("/flash-cards/7/", 2, "qpage") == "/flash-cards/7/?qpage=2"
    assert page_url("/flash-cards/", 2, extra={"per": 5}) == "/flash-cards/?page=2&per=5"


def test_links_suppressed_for_single_page():
    assert build_page_links(1, 1, "/x/") == []
    assert build_page_links(1, 0, "/x/") == []


def test_links_middle_window():
    links = build_page_links(5, 10, "/flash-cards/")
    labels = [l.label for l in links]
    assert labels == ["«", "1", "…", "4", "5", "6", "…", "10", "»"]

    prev, nxt = links[0], links[-1]
    assert prev.url == "/flash-cards/?page=4" and not prev.is_disabled
    assert nxt.url == "/flash-cards/?page=6" and not nxt.is_disabled

    active = [l for l in links if l.is_active]
    assert len(active) == 1 and active[0].page == 5

    # «…» — без ссылки
    for l in links:
        if l.is_ellipsis:
            assert l.url == "" and l.page is None


def test_links_prev_next_disabled_at_bounds():
    first = build_page_links(1, 3, "/p/", "qpage")
    assert first[0].is_disabled and first[0].url == ""
    assert first[-1].url == "/p/?qpage=2"

    last = build_page_links(3, 3, "/p/", "qpage")
    assert last[-1].is_disabled
    assert last[0].url == "/p/?qpage=2"


def test_callback_pager_invokes_callback_for_other_pages_only():
    calls = []
    pager = CallbackPager(5, 10, calls.append)

    assert pager.select(None) is False        # «…» не кликабельна
    assert pager.select(5) is False           # текущая — без колбэка
    assert pager.select(11) is False          # вне диапазона
    assert calls == []

    assert pager.select(10) is True
    assert calls == [10]
    assert pager.current == 10
    assert pager.markers == [1, None, 6, 7, 8, 9, 10]


def test_callback_pager_previous_next():
    calls = []
    pager = CallbackPager(1, 2, calls.append)
    assert pager.previous() is False
    assert pager.next() is True
    assert pager.next() is False
    assert pager.previous() is True
    assert calls == [2, 1]


def test_callback_pager_hidden_for_single_page():
    assert CallbackPager(1, 1, lambda p: None).visible is False
    assert CallbackPager(1, 2, lambda p: None).visible is True


def test_item_pager_slices_items():
    pager = ItemPager(list(range(12)), 5)
    assert pager.total_items == 12
    assert pager.total_pages == 3
    assert pager.current_items == [0, 1, 2, 3, 4]

    pager.next_page()
    assert pager.current_page == 2
    assert (pager.index_of_first_item, pager.index_of_last_item) == (5, 10)

    pager.next_page()
    pager.next_page()                         # дальше последней не уходим
    assert pager.current_page == 3
    assert pager.current_items == [10, 11]

    pager.previous_page()
    pager.previous_page()
    pager.previous_page()                     # и раньше первой тоже
    assert pager.current_page == 1


def test_item_pager_callback_and_item_added():
    seen = []
    items = list(range(10))
    pager = ItemPager(items, 5, on_page_change=seen.append, page=2)

    # 10 элементов ровно на 2 страницах — новый откроет третью
    pager.handle_item_added()
    assert pager.current_page == 3
    assert seen == [3]

    # 11 элементов — новый помещается на текущую последнюю страницу
    pager = ItemPager(list(range(11)), 5, on_page_change=seen.append, page=3)
    pager.handle_item_added()
    assert pager.current_page == 3
    assert seen == [3]


def test_item_pager_as_callback_pager_drives_item_pager():
    pager = ItemPager(list(range(50)), 5)
    interactive = pager.as_callback_pager()
    assert interactive.markers == [1, 2, 3, 4, 5, None, 10]

    interactive.select(10)
    assert pager.current_page == 10
    assert pager.current_items == list(range(45, 50))


def test_links_carry_extra_query():
    links = build_page_links(2, 3, "/flash-cards/", extra={"per": 5})
    urls = [l.url for l in links if l.url]
    assert urls == [
        "/flash-cards/?page=1&per=5",
        "/flash-cards/?page=1&per=5",
        "/flash-cards/?page=2&per=5",
        "/flash-cards/?page=3&per=5",
        "/flash-cards/?page=3&per=5",
    ]
