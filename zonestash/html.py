from collections.abc import Mapping

from zonestash._web_compat import (
    escape,
    format_html,
    mark_safe,
    urlencode,
)
from zonestash.conf import ZONE_HEAD

TITLE_ID = 'html:title'


def title(stash, title):
    # language=rst
    """
    Add the `<title>...</title>` tag to the `head` zone. There can be only one title, and
    that is why there is no `id` argument: the title always has the id `html:title`, so
    adding a title again replaces the previous one.
    """
    return stash.add(ZONE_HEAD, format_html('<title>{}</title>', title), TITLE_ID)


def _is_scalar(value):
    return isinstance(value, (str, int, float))


def _pairs(value, prefix=None):
    items = value.items() if isinstance(value, Mapping) else enumerate(value)
    for key, item in items:
        if prefix is not None:
            key = f'{prefix}[{key}]'
        if item is None:
            continue
        if _is_scalar(item):
            yield key, _scalar(item)
        else:
            yield from _pairs(item, key)


def _flatten(value):
    if value is None:
        return ''
    return urlencode(list(_pairs(value)))


def _scalar(value):
    if isinstance(value, bool):
        return '1' if value else ''
    if _is_scalar(value):
        return value
    return _flatten(value)


def attributes(attrs):
    """
    Render HTML attributes from a dict. Integer keys are positional: only their value is
    rendered, which is how you get bare attributes like `checked`.

        >>> attributes({'class': 'a b', 0: 'checked'})
        'class="a b" checked'
    """
    def parts():
        for key, value in attrs.items():
            value = escape(_scalar(value))
            if isinstance(key, int) and not isinstance(key, bool):
                yield value
            else:
                yield f'{key}="{value}"'

    return mark_safe(' '.join(parts()))
