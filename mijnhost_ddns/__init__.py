#
#
#

__version__ = '1.0.0'

from .client import MijnHostClient  # noqa: E402
from .exceptions import (  # noqa: E402
    ConfigException,
    MalformedRecordValue,
    MijnHostClientException,
    MijnHostClientNotFound,
    MijnHostClientUnauthorized,
    MijnHostException,
    PublicIpLookupException,
)
from .reconcile import (  # noqa: E402
    DEFAULT_TTL,
    Action,
    Reconciliation,
    reconcile,
)
from .records import Record  # noqa: E402

__all__ = [
    'DEFAULT_TTL',
    'Action',
    'ConfigException',
    'MalformedRecordValue',
    'MijnHostClient',
    'MijnHostClientException',
    'MijnHostClientNotFound',
    'MijnHostClientUnauthorized',
    'MijnHostException',
    'PublicIpLookupException',
    'Reconciliation',
    'Record',
    'reconcile',
]
