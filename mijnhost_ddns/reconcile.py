#
#
#

"""Reconciliation of a managed name's A/AAAA records with observed addresses.

One routine, parametrised by address family, decides per family between
no-op, update, create, delete and warn. Both families are evaluated against
the record set as it was fetched; deletions are applied last.
"""

import logging
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Callable, List, NamedTuple, Optional

from .exceptions import MalformedRecordValue, PublicIpLookupException
from .records import Record

DEFAULT_TTL = 3600

log = logging.getLogger('Reconciler')


class AddressFamily(NamedTuple):
    record_type: str
    label: str
    address_class: type

    def parse(self, value):
        return self.address_class(value)


IPV4 = AddressFamily('A', 'ipv4', IPv4Address)
IPV6 = AddressFamily('AAAA', 'ipv6', IPv6Address)


class Action(Enum):
    NOOP = 'noop'
    UPDATE = 'update'
    CREATE = 'create'
    DELETE = 'delete'
    WARN = 'warn'


MUTATIONS = (Action.UPDATE, Action.CREATE, Action.DELETE)


class Outcome(NamedTuple):
    family: AddressFamily
    action: Action
    old: Optional[str] = None
    new: Optional[str] = None
    ttl: Optional[int] = None
    message: str = ''


class Reconciliation(object):
    """Result of one reconciliation.

    Unpacks as ``records, changed = reconcile(...)``; ``outcomes`` holds
    the per-family decisions for reporting.
    """

    def __init__(self, records: List[Record], outcomes: List[Outcome]):
        self.records = records
        self.outcomes = outcomes

    @property
    def changed(self) -> bool:
        return any(o.action in MUTATIONS for o in self.outcomes)

    def __iter__(self):
        yield self.records
        yield self.changed

    def __repr__(self):
        actions = ', '.join(
            f'{o.family.record_type}={o.action.value}' for o in self.outcomes
        )
        return f'Reconciliation<changed={self.changed}, {actions}>'


def _find(records, family, managed_name):
    matches = [
        r for r in records if r.matches(family.record_type, managed_name)
    ]
    return matches[0] if matches else None, len(matches) > 1


def _observe(family, observe):
    observed = observe()
    if observed is None:
        return None
    try:
        return family.parse(str(observed))
    except ValueError as e:
        raise PublicIpLookupException(
            f'observed {observed!r} is not an {family.label} address'
        ) from e


def _reconcile_family(
    records,
    family,
    sibling_ttl,
    managed_name,
    manage_records,
    observed,
    existing,
    deletions,
):
    label = family.label
    _type = family.record_type

    if existing is not None:
        if observed is not None:
            if observed == family.parse(existing.value):
                log.debug(
                    'public %s found (%s) which matches the %s record',
                    label,
                    observed,
                    _type,
                )
                return Outcome(family, Action.NOOP, existing.value, None)
            old = existing.value
            existing.value = str(observed)
            log.info('%s record updated from %s to %s', _type, old, observed)
            return Outcome(
                family,
                Action.UPDATE,
                old,
                existing.value,
                existing.ttl,
                f'{_type} record updated from {old} to {existing.value}',
            )
        if manage_records:
            deletions.append(family)
            log.info(
                'public %s not found, deleting %s record (%s)',
                label,
                _type,
                existing.value,
            )
            return Outcome(
                family,
                Action.DELETE,
                existing.value,
                None,
                existing.ttl,
                f'{_type} record {existing.value} deleted',
            )
        message = (
            f'public {label} not found but an {_type} record '
            f'({existing.value}) exists, consider enabling record management'
        )
        log.warning(message)
        return Outcome(family, Action.WARN, existing.value, None, None, message)

    if observed is None:
        log.debug(
            'public %s not found, matching the absence of an %s record',
            label,
            _type,
        )
        return Outcome(family, Action.NOOP)

    if not manage_records:
        message = (
            f'public {label} found ({observed}) but no {_type} record '
            'exists, consider enabling record management'
        )
        log.warning(message)
        return Outcome(family, Action.WARN, None, str(observed), None, message)

    ttl = sibling_ttl if sibling_ttl is not None else DEFAULT_TTL
    record = Record(
        type=_type, name=managed_name, value=str(observed), ttl=ttl
    )
    records.append(record)
    log.info(
        '%s record created with IP %s and a TTL of %d seconds',
        _type,
        record.value,
        ttl,
    )
    return Outcome(
        family,
        Action.CREATE,
        None,
        record.value,
        ttl,
        f'{_type} record created with IP {record.value} (ttl {ttl})',
    )


def reconcile(
    records: List[Record],
    managed_name: str,
    manage_records: bool,
    observe_ipv4: Callable[[], Optional[IPv4Address]],
    observe_ipv6: Callable[[], Optional[IPv6Address]],
) -> Reconciliation:
    """Converge ``managed_name``'s A and AAAA records on the observed
    addresses.

    Args:
        records: Full record set of the domain, left unmodified
        managed_name: Exact record name to manage
        manage_records: Whether records may be created and deleted
        observe_ipv4: Returns the public IPv4 address or None
        observe_ipv6: Returns the public IPv6 address or None

    Returns:
        Reconciliation holding the new record set and outcomes

    Raises:
        MalformedRecordValue: If an existing managed record's value does not
            parse as its family's address
    """
    records = [r.copy() for r in records]
    families = ((IPV4, observe_ipv4), (IPV6, observe_ipv6))

    existing = {}
    outcomes = []
    for family, _ in families:
        record, duplicated = _find(records, family, managed_name)
        if record is not None:
            try:
                family.parse(record.value)
            except ValueError as e:
                raise MalformedRecordValue(record) from e
        if duplicated:
            message = (
                f'multiple {family.record_type} records exist for '
                f'{managed_name}, only the first one is considered'
            )
            log.warning(message)
            outcomes.append(
                Outcome(family, Action.WARN, record.value, None, None, message)
            )
        existing[family.record_type] = record

    # sibling TTLs as fetched, before anything below rewrites the set
    ttls = {
        _type: record.ttl if record is not None else None
        for _type, record in existing.items()
    }
    sibling = {
        IPV4.record_type: IPV6.record_type,
        IPV6.record_type: IPV4.record_type,
    }

    deletions = []
    for family, observe in families:
        outcomes.append(
            _reconcile_family(
                records,
                family,
                ttls[sibling[family.record_type]],
                managed_name,
                manage_records,
                _observe(family, observe),
                existing[family.record_type],
                deletions,
            )
        )

    for family in deletions:
        records = [
            r
            for r in records
            if not r.matches(family.record_type, managed_name)
        ]

    return Reconciliation(records, outcomes)
