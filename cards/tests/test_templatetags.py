from django.core.paginator import Paginator
from django.template import Context, Template


def _render(tpl, **ctx):
    return Template("{% load cards_extras %}" + tpl).render(Context(ctx))


def test_pagination_bar_renders_links_and_ellipsis():
    page = Paginator(list(range(200)), 20).page(1)
    html = _render("{% pagination_bar page_obj '/flash-cards/' %}", page_obj=page)

    assert 'href="/flash-cards/?page=2"' in html
    assert 'aria-current="page"' in html
    assert html.count('class="page-ellipsis"') == 1


def test_pagination_bar_keeps_extra_query():
    page = Paginator(list(range(30)), 5).page(2)
    html = _render("{% pagination_bar page_obj '/flash-cards/' extra=query %}",
                   page_obj=page, query={"per": 5})

    assert 'href="/flash-cards/?page=3&amp;per=5"' in html
    assert 'href="/flash-cards/?page=1&amp;per=5"' in html


def test_pagination_bar_empty_for_single_page():
    page = Paginator([1, 2], 20).page(1)
    html = _render("{% pagination_bar page_obj '/x/' %}", page_obj=page)
    assert "fc-pagination" not in html
