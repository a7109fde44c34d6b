#
#
#

"""Public address discovery through an external "what is my IP" service.

Each family is queried on its own endpoint; a service reachable only over
IPv6 answers with the caller's IPv6 address and vice versa. Failing to
connect at all means the machine has no public address in that family.
"""

import logging
from ipaddress import IPv4Address, IPv6Address
from typing import Optional

from requests import ConnectionError, Session, Timeout

from .exceptions import PublicIpLookupException
from .reconcile import IPV4, IPV6

DEFAULT_IPV4_URL = 'https://api4.ipify.org'
DEFAULT_IPV6_URL = 'https://api6.ipify.org'


class PublicIpResolver(object):
    def __init__(
        self,
        ipv4_url=DEFAULT_IPV4_URL,
        ipv6_url=DEFAULT_IPV6_URL,
        timeout=10,
        retries=2,
        session=None,
    ):
        self.log = logging.getLogger('PublicIpResolver')
        self.ipv4_url = ipv4_url
        self.ipv6_url = ipv6_url
        self.timeout = timeout
        self.retries = retries
        self._session = session if session is not None else Session()

    def _fetch(self, url):
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            try:
                response = self._session.get(
                    url, params={'format': 'json'}, timeout=self.timeout
                )
            except (ConnectionError, Timeout) as e:
                self.log.debug(
                    '_fetch: url=%s, attempt=%d/%d failed: %s',
                    url,
                    attempt,
                    attempts,
                    e,
                )
                continue
            if not response.ok:
                raise PublicIpLookupException(
                    f'{url} responded with status {response.status_code}'
                )
            try:
                raw = response.json()['ip']
            except (ValueError, KeyError, TypeError) as e:
                raise PublicIpLookupException(
                    f'{url} returned an unexpected body: {response.text!r}'
                ) from e
            # absence only ever comes from an unreachable service
            if not isinstance(raw, str):
                raise PublicIpLookupException(
                    f'{url} returned an unexpected body: {response.text!r}'
                )
            return raw
        return None

    def _lookup(self, family, url):
        raw = self._fetch(url)
        if raw is None:
            self.log.debug('_lookup: no public %s address', family.label)
            return None
        try:
            address = family.parse(raw)
        except ValueError as e:
            raise PublicIpLookupException(
                f'{url} returned {raw!r}, not an {family.label} address'
            ) from e
        self.log.debug(
            '_lookup: public %s address is %s', family.label, address
        )
        return address

    def ipv4(self) -> Optional[IPv4Address]:
        return self._lookup(IPV4, self.ipv4_url)

    def ipv6(self) -> Optional[IPv6Address]:
        return self._lookup(IPV6, self.ipv6_url)
