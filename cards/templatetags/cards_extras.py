from django import template

from cards.services.pager import build_page_links

register = template.Library()


@register.inclusion_tag("cards/_pagination.html")
def pagination_bar(page_obj, base_path, page_param="page", extra=None):
    """
    Панель пагинации для Django-страницы: первая и последняя страницы видны
    всегда, вокруг текущей — соседи, на месте пропусков «…».
    ``extra`` — словарь параметров запроса, которые сохраняются в ссылках.
    """
    # при одной странице панель не рисуем
    return {
        "links": build_page_links(page_obj.number, page_obj.paginator.num_pages,
                                  base_path, page_param, extra),
    }
