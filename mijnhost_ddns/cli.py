#
#
#

"""Command-line entry point."""

import argparse
import logging
import os
import signal
from threading import Event

from .client import MijnHostClient
from .config import load_config
from .exceptions import ConfigException
from .ip import PublicIpResolver
from .updater import DDNSUpdater

LOG_LEVEL_ENV = 'MIJNHOST_DDNS_LOG_LEVEL'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='mijnhost-ddns',
        description='Keep the A/AAAA records of a mijn.host domain in sync '
        'with this machine\'s public addresses',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        'config', nargs='?', default='./config.toml', help='Path to TOML config'
    )
    parser.add_argument(
        '--log-level',
        default=os.environ.get(LOG_LEVEL_ENV, 'INFO').upper(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help=f'Log level (also read from ${LOG_LEVEL_ENV})',
    )
    parser.add_argument(
        '--once',
        action='store_true',
        help='Run a single cycle regardless of the configured interval',
    )
    return parser.parse_args(argv)


def build_updater(config):
    client = MijnHostClient(config.api_key)
    lookup = config.lookup
    resolver = PublicIpResolver(
        ipv4_url=lookup.ipv4_url,
        ipv6_url=lookup.ipv6_url,
        timeout=lookup.timeout,
        retries=lookup.retries,
    )
    return DDNSUpdater(config, client, resolver)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s [%(levelname)s] %(name)s %(message)s',
    )
    log = logging.getLogger('mijnhost-ddns')

    try:
        config = load_config(args.config)
    except ConfigException as e:
        log.error('invalid configuration: %s', e)
        return 2
    if args.once:
        config.interval = 0

    updater = build_updater(config)
    stop_event = Event()

    def handle_stop(signum, frame):
        log.info(
            '%s received, exiting after the current cycle',
            signal.Signals(signum).name,
        )
        stop_event.set()

    # a cycle is never interrupted midway, also in single-run mode
    signal.signal(signal.SIGINT, handle_stop)
    signal.signal(signal.SIGTERM, handle_stop)

    if config.interval == 0:
        try:
            updater.run()
        except Exception:
            log.exception('update routine failed')
            return 1
        return 0

    updater.run(stop_event)
    return 0
