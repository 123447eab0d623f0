from zonestash._web_compat import format_html
from zonestash.conf import ZONE_HEAD
from zonestash.html import attributes

CHARSET_ID = 'meta:charset'


def link(stash, href, rel, id='', extra=None):
    # language=rst
    """
    Add a `<link>` tag to the `head` zone. `extra` holds additional attributes such as
    `type`, `media` or `sizes`. If `id` is empty the tag is identified by its `rel` and
    `href`, so linking the same thing twice only renders it once.
    """
    if not id:
        id = f'link:{rel}:{href}'

    return stash.add(
        ZONE_HEAD,
        format_html('<link {}>', attributes({'rel': rel, 'href': href, **(extra or {})})),
        id,
    )


def meta(stash, name, content, id='', extra=None):
    if not id:
        id = f'meta:{name}'

    return stash.add(
        ZONE_HEAD,
        format_html('<meta {}>', attributes({'name': name, 'content': content, **(extra or {})})),
        id,
    )


def charset(stash, charset='utf-8'):
    return stash.add(ZONE_HEAD, format_html('<meta charset="{}">', charset), CHARSET_ID)
