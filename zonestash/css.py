from zonestash._web_compat import (
    format_html,
    mark_safe,
)
from zonestash.conf import ZONE_HEAD
from zonestash.meta import link


def style(stash, css, id=''):
    # language=rst
    """
    Add an inline style block to the `head` zone. Pass the CSS without the wrapping
    `<style>` tag, it is added here. If `id` is empty the position of the block in the
    `head` zone is used.

    .. code-block:: python

        style(stash, 'p { font-size: 18pt; }')
    """
    if not id:
        id = len(stash.snapshot(ZONE_HEAD).value) if ZONE_HEAD in stash else 0

    return stash.add(
        ZONE_HEAD,
        format_html('<style type="text/css">{}</style>', mark_safe(css)),
        f'css:{id}',
    )


def stylesheet(stash, href, id='', extra=None):
    # language=rst
    """
    Add a linked stylesheet to the `head` zone. `extra` can override `type` and add other
    attributes such as `media` or `integrity`. If `id` is empty the url of the stylesheet
    is used, so the same stylesheet is never linked twice.

    .. code-block:: python

        stylesheet(
            stash,
            'https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css',
            extra=dict(crossorigin='anonymous'),
        )
    """
    extra = {'type': 'text/css', **(extra or {})}

    if not id:
        id = href

    return link(stash, href, 'stylesheet', id=f'css:{id}', extra=extra)
