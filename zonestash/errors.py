from enum import Enum


class ErrorKind(Enum):
    ZONE_NOT_FOUND = 'zone_not_found'
    ASSET_NOT_FOUND = 'asset_not_found'
    ZONE_ALREADY_RENDERED = 'zone_already_rendered'


class StashException(Exception):
    kind = None

    def __init__(self, zone, id=None):
        self.zone = zone
        self.id = id
        super().__init__(self.describe())

    def describe(self):
        raise NotImplementedError()  # pragma: no cover


class ZoneNotFound(StashException):
    kind = ErrorKind.ZONE_NOT_FOUND

    def describe(self):
        return f"Assets zone '{self.zone}' does not exist."


class AssetNotFound(StashException):
    kind = ErrorKind.ASSET_NOT_FOUND

    def describe(self):
        return f"Nothing found with id='{self.id}' in assets zone '{self.zone}'."


class ZoneAlreadyRendered(StashException):
    kind = ErrorKind.ZONE_ALREADY_RENDERED

    def describe(self):
        return f"Assets zone '{self.zone}' has already been rendered."


exception_by_kind = {
    exception.kind: exception
    for exception in [
        ZoneNotFound,
        AssetNotFound,
        ZoneAlreadyRendered,
    ]
}
