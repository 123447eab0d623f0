import logging

from zonestash._web_compat import Promise
from zonestash.conf import (
    declared_zones_only_on,
    default_zones,
    render_once_on,
)
from zonestash.errors import (
    AssetNotFound,
    ZoneAlreadyRendered,
    ZoneNotFound,
)
from zonestash.result import Result

log = logging.getLogger('zonestash')

AUTO_ID_PREFIX = 'asset:'


class Stash:
    # language=rst
    """
    Assets are accumulated in zones. There are two zones by default: `head` (used for the
    `<head>...</head>` element) and `footer` (used for the bottom of the `<body>` tag).

    Every asset in a zone has an id. Adding an asset with an id that is already in the zone
    replaces the content of that asset but keeps its position, so the zone is always rendered
    in the order the ids were first added.

    With `render_once=True` each zone can be rendered exactly once. After that the zone is
    locked: rendering it again, or adding, deleting or resetting assets in it, fails with
    `ZoneAlreadyRendered`. This protects a page from emitting its head twice when a template
    renders it defensively from more than one place.

    With `declared_zones_only=True` only the zones passed in `zones` (or declared later with
    `declare_zone`) accept assets. Otherwise a zone is created the first time something is added
    to it.

    None of the operations raise for a missing zone, a missing asset or a locked zone. They
    return a `Result` instead, which you can `unwrap()` to get an exception.

    Create one stash per request. The stash has no locking and must not be shared between
    concurrent renders.
    """

    def __init__(self, zones=None, *, render_once=False, declared_zones_only=False):
        if zones is None:
            zones = default_zones()
        self.render_once = render_once
        self.declared_zones_only = declared_zones_only
        self._zones = {zone: {} for zone in zones}
        self._rendered = set()

    @classmethod
    def from_settings(cls):
        return cls(
            zones=default_zones(),
            render_once=render_once_on(),
            declared_zones_only=declared_zones_only_on(),
        )

    @classmethod
    def gate(cls, zones=None):
        return cls(zones, render_once=True, declared_zones_only=True)

    def __repr__(self):
        return f'<{type(self).__name__} zones={self.zones()!r} render_once={self.render_once}>'

    def __contains__(self, zone):
        return zone in self._zones

    def __len__(self):
        return len(self._zones)

    def _fail(self, error, value=None):
        log.warning(str(error))
        return Result.failure(error, value)

    def _locked(self, zone):
        return self.render_once and zone in self._rendered

    def zones(self):
        return list(self._zones)

    list_zones = zones
    stacks = zones

    def declare_zone(self, zone):
        if zone not in self._zones:
            log.debug('Declared assets zone %r', zone)
            self._zones[zone] = {}
        return Result.success(zone)

    def is_rendered(self, zone):
        return zone in self._rendered

    def next_id(self, zone):
        assets = self._zones.get(zone, {})
        n = 1 + len(assets)
        while f'{AUTO_ID_PREFIX}{n}' in assets:
            log.debug('Skipping taken id %s%s in assets zone %r', AUTO_ID_PREFIX, n, zone)
            n += 1
        return f'{AUTO_ID_PREFIX}{n}'

    def add(self, zone, content, id=''):
        if isinstance(content, Promise):
            content = str(content)
        if not isinstance(content, str):
            raise TypeError(f'Assets must be strings, you sent {content!r} to zone {zone}')

        if zone not in self._zones:
            if self.declared_zones_only:
                return self._fail(ZoneNotFound(zone))
            self.declare_zone(zone)

        if not id:
            id = self.next_id(zone)

        if self._locked(zone):
            return self._fail(ZoneAlreadyRendered(zone, id))

        self._zones[zone][id] = content
        return Result.success(id)

    def exists(self, zone, id):
        if zone not in self._zones:
            return self._fail(ZoneNotFound(zone, id), value=False)

        return Result.success(id in self._zones[zone])

    def delete(self, zone, id):
        if zone not in self._zones:
            return self._fail(ZoneNotFound(zone, id), value=False)

        if self._locked(zone):
            return self._fail(ZoneAlreadyRendered(zone, id), value=False)

        if id not in self._zones[zone]:
            return self._fail(AssetNotFound(zone, id), value=False)

        del self._zones[zone][id]
        return Result.success(True)

    def snapshot(self, zone):
        if zone not in self._zones:
            return self._fail(ZoneNotFound(zone))

        return Result.success(dict(self._zones[zone]))

    stack = snapshot

    def reset(self, zone):
        if zone not in self._zones:
            return self._fail(ZoneNotFound(zone), value=False)

        if self._locked(zone):
            return self._fail(ZoneAlreadyRendered(zone), value=False)

        self._zones[zone] = {}
        return Result.success(True)

    def render(self, zone, newlines=False):
        if zone not in self._zones:
            return self._fail(ZoneNotFound(zone))

        if self._locked(zone):
            return self._fail(ZoneAlreadyRendered(zone))

        self._rendered.add(zone)
        separator = '\n' if newlines else ''
        return Result.success(separator.join(self._zones[zone].values()))

    display = render


def for_request(request):
    """
    Return the stash for this request, creating it from the settings the first time.
    """
    stash = getattr(request, 'zonestash', None)
    if stash is None:
        stash = Stash.from_settings()
        request.zonestash = stash
    return stash
