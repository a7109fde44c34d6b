#
#
#

from octodns.provider import ProviderException


class MijnHostException(ProviderException):
    pass


class MijnHostClientException(MijnHostException):
    pass


class MijnHostClientNotFound(MijnHostClientException):
    def __init__(self):
        super().__init__('Not Found')


class MijnHostClientUnauthorized(MijnHostClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class MalformedRecordValue(MijnHostException):
    def __init__(self, record):
        super().__init__(
            f'{record.type} record {record.name} has a malformed value '
            f'{record.value!r}'
        )
        self.record = record


class PublicIpLookupException(MijnHostException):
    pass


class ConfigException(MijnHostException):
    pass
