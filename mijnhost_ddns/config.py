#
#
#

"""Configuration loading from a TOML file."""

import tomllib
from dataclasses import dataclass, field
from typing import Dict

from .exceptions import ConfigException
from .ip import DEFAULT_IPV4_URL, DEFAULT_IPV6_URL


@dataclass
class LookupConfig:
    ipv4_url: str = DEFAULT_IPV4_URL
    ipv6_url: str = DEFAULT_IPV6_URL
    timeout: float = 10
    retries: int = 2


@dataclass
class Config:
    """Parsed configuration.

    Attributes:
        domain_name: Domain whose record set is managed, e.g. 'example.com'
        api_key: mijn.host API key
        record_name: Fully-qualified managed name as the provider reports it
        interval: Seconds between cycles, 0 to run a single cycle
        manage_records: Whether records may be created and deleted
        lookup: Public IP lookup settings
    """

    domain_name: str
    api_key: str
    record_name: str
    interval: int = 0
    manage_records: bool = False
    lookup: LookupConfig = field(default_factory=LookupConfig)

    def __repr__(self):
        return (
            f'Config<domain_name={self.domain_name}, api_key=***, '
            f'record_name={self.record_name}, interval={self.interval}, '
            f'manage_records={self.manage_records}>'
        )


def qualify_record_name(record_name, domain_name):
    if record_name == '@':
        return f'{domain_name}.'
    return f'{record_name}.{domain_name}'


def _get(data, key, _type, default=None, required=True):
    if key not in data:
        if required:
            raise ConfigException(f'missing required key {key!r}')
        return default
    value = data[key]
    # bool is an int subclass, keep them apart
    if not isinstance(value, _type) or (
        isinstance(value, bool) and bool not in _type
    ):
        raise ConfigException(f'invalid value for {key!r}: {value!r}')
    return value


def config_from_dict(data: Dict) -> Config:
    domain_name = _get(data, 'domain_name', (str,)).rstrip('.')
    api_key = _get(data, 'api_key', (str,))
    record_name = _get(data, 'record_name', (str,))
    interval = _get(data, 'interval', (int,), default=0, required=False)
    manage_records = _get(
        data, 'manage_records', (bool,), default=False, required=False
    )

    if not domain_name:
        raise ConfigException("'domain_name' must not be empty")
    if not record_name:
        raise ConfigException("'record_name' must not be empty")
    if interval < 0:
        raise ConfigException(f"'interval' must be >= 0, got {interval}")

    lookup_data = _get(data, 'lookup', (dict,), default={}, required=False)
    defaults = LookupConfig()
    lookup = LookupConfig(
        ipv4_url=_get(
            lookup_data, 'ipv4_url', (str,), defaults.ipv4_url, False
        ),
        ipv6_url=_get(
            lookup_data, 'ipv6_url', (str,), defaults.ipv6_url, False
        ),
        timeout=_get(
            lookup_data, 'timeout', (int, float), defaults.timeout, False
        ),
        retries=_get(lookup_data, 'retries', (int,), defaults.retries, False),
    )
    if lookup.retries < 0:
        raise ConfigException(f"'retries' must be >= 0, got {lookup.retries}")

    return Config(
        domain_name=domain_name,
        api_key=api_key,
        record_name=qualify_record_name(record_name, domain_name),
        interval=interval,
        manage_records=manage_records,
        lookup=lookup,
    )


def load_config(path) -> Config:
    """Read and validate a TOML configuration file.

    Raises:
        ConfigException: If the file is missing, not TOML or invalid
    """
    try:
        with open(path, 'rb') as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigException(f'config file {path} not found') from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigException(
            f'config file {path} is not valid TOML: {e}'
        ) from e
    return config_from_dict(data)
