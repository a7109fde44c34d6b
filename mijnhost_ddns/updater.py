#
#
#

import logging
import time
from threading import Event

from .clients import AddressLookup, RecordStore
from .config import Config
from .reconcile import Reconciliation, reconcile


class DDNSUpdater(object):
    """Drives reconciliation cycles for one managed name.

    Cycles run serially; a stop request is only honoured between cycles.
    """

    def __init__(
        self, config: Config, client: RecordStore, resolver: AddressLookup
    ):
        self.log = logging.getLogger(f'DDNSUpdater[{config.record_name}]')
        self.log.debug(
            '__init__: domain_name=%s, interval=%d, manage_records=%s',
            config.domain_name,
            config.interval,
            config.manage_records,
        )
        self.config = config
        self._client = client
        self._resolver = resolver

    def run_once(self) -> Reconciliation:
        self.log.info('run_once: running update routine')
        config = self.config

        records = self._client.records_get(config.domain_name)
        result = reconcile(
            records,
            config.record_name,
            config.manage_records,
            self._resolver.ipv4,
            self._resolver.ipv6,
        )

        if result.changed:
            self.log.debug('run_once: putting records back to the API')
            self._client.records_put(config.domain_name, result.records)
            self.log.info(
                'run_once: records updated, len(records)=%d',
                len(result.records),
            )
        else:
            self.log.info('run_once: no action required')

        return result

    def run(self, stop_event=None):
        """Run cycles until ``stop_event`` is set.

        With an interval of 0 a single cycle is run and its failure is
        raised to the caller; otherwise failures are logged and the next
        cycle is attempted on schedule.
        """
        if self.config.interval == 0:
            return self.run_once()

        if stop_event is None:
            stop_event = Event()

        interval = self.config.interval
        next_run = time.monotonic()
        while not stop_event.is_set():
            try:
                self.run_once()
            except Exception:
                self.log.exception('run: update routine failed')
            next_run += interval
            # skip ticks missed while a slow cycle was running
            now = time.monotonic()
            if next_run < now:
                next_run = now
            stop_event.wait(next_run - now)

        self.log.info('run: stop requested, exiting')
