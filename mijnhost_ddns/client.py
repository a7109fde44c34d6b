#
#
#

import logging

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import MijnHostClientNotFound, MijnHostClientUnauthorized
from .records import Record


class MijnHostClient(object):
    BASE_URL = 'https://mijn.host/api/v2'

    def __init__(self, api_key, timeout=30):
        self.log = logging.getLogger('MijnHostClient')
        session = Session()
        session.headers.update(
            {
                'API-Key': api_key,
                'Accept': 'application/json',
                'User-Agent': f'octodns/{octodns_version} mijnhost-ddns/{package_version}',
            }
        )
        self._session = session
        self._timeout = timeout

    def _do(self, method, path, params=None, data=None):
        url = f'{self.BASE_URL}{path}'
        self.log.debug('_do: method=%s, url=%s', method, url)
        response = self._session.request(
            method, url, params=params, json=data, timeout=self._timeout
        )
        if response.status_code == 401:
            raise MijnHostClientUnauthorized()
        if response.status_code == 404:
            raise MijnHostClientNotFound()
        response.raise_for_status()
        return response

    def _do_json(self, method, path, params=None, data=None):
        return self._do(method, path, params, data).json()

    def records_get(self, domain):
        data = self._do_json('GET', f'/domains/{domain}/dns')
        records = [Record.from_dict(r) for r in data['data']['records']]
        self.log.debug(
            'records_get: domain=%s, len(records)=%d', domain, len(records)
        )
        return records

    def records_put(self, domain, records):
        self.log.debug(
            'records_put: domain=%s, len(records)=%d', domain, len(records)
        )
        data = {'records': [r.to_dict() for r in records]}
        self._do('PUT', f'/domains/{domain}/dns', data=data)
