__version__ = '1.0.0'

from zonestash.conf import (
    ZONE_FOOTER,
    ZONE_HEAD,
)
from zonestash.errors import (
    AssetNotFound,
    ErrorKind,
    StashException,
    ZoneAlreadyRendered,
    ZoneNotFound,
)
from zonestash.result import Result
from zonestash.stash import (
    Stash,
    for_request,
)

__all__ = [
    'AssetNotFound',
    'ErrorKind',
    'for_request',
    'Result',
    'Stash',
    'StashException',
    'ZONE_FOOTER',
    'ZONE_HEAD',
    'ZoneAlreadyRendered',
    'ZoneNotFound',
]
