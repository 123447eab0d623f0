from zonestash._web_compat import (
    format_html,
    mark_safe,
)
from zonestash.conf import ZONE_FOOTER
from zonestash.html import attributes


def script(stash, src, id='', zone=ZONE_FOOTER, extra=None):
    # language=rst
    """
    Add a `<script src="...">` tag, by default to the `footer` zone. If `id` is empty the
    url of the script is used, so the same script is never included twice.

    .. code-block:: python

        script(stash, 'https://cdn.jsdelivr.net/npm/select2@4.0.12/dist/js/select2.min.js')
    """
    if not id:
        id = src

    return stash.add(
        zone,
        format_html('<script {}></script>', attributes({'src': src, **(extra or {})})),
        f'js:{id}',
    )


def inline_script(stash, code, id='', zone=ZONE_FOOTER):
    if not id:
        id = len(stash.snapshot(zone).value) if zone in stash else 0

    return stash.add(
        zone,
        format_html('<script>{}</script>', mark_safe(code)),
        f'js:{id}',
    )
