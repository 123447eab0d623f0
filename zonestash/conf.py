from zonestash._web_compat import (
    ImproperlyConfigured,
    settings,
)

ZONE_HEAD = 'head'
ZONE_FOOTER = 'footer'

DEFAULT_ZONES = (ZONE_HEAD, ZONE_FOOTER)


def _setting(name, default):
    try:
        return getattr(settings, name, default)
    except ImproperlyConfigured:
        return default


def default_zones():
    return tuple(_setting('ZONESTASH_ZONES', DEFAULT_ZONES))


def render_once_on():
    return _setting('ZONESTASH_RENDER_ONCE', True)


def declared_zones_only_on():
    return _setting('ZONESTASH_DECLARED_ZONES_ONLY', False)
