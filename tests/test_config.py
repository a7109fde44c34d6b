#
# Tests for TOML configuration loading
#

import os
from tempfile import TemporaryDirectory
from unittest import TestCase

from mijnhost_ddns.config import (
    LookupConfig,
    config_from_dict,
    load_config,
    qualify_record_name,
)
from mijnhost_ddns.exceptions import ConfigException

BASE = {
    'domain_name': 'unit.tests',
    'api_key': 'secret',
    'record_name': 'home',
    'interval': 300,
    'manage_records': True,
}


class TestQualifyRecordName(TestCase):
    def test_apex(self):
        self.assertEqual('unit.tests.', qualify_record_name('@', 'unit.tests'))

    def test_label(self):
        self.assertEqual(
            'home.unit.tests', qualify_record_name('home', 'unit.tests')
        )


class TestConfigFromDict(TestCase):
    def test_full(self):
        config = config_from_dict(BASE)
        self.assertEqual('unit.tests', config.domain_name)
        self.assertEqual('secret', config.api_key)
        self.assertEqual('home.unit.tests', config.record_name)
        self.assertEqual(300, config.interval)
        self.assertTrue(config.manage_records)
        self.assertEqual(LookupConfig(), config.lookup)

    def test_defaults(self):
        data = dict(BASE)
        del data['interval']
        del data['manage_records']
        config = config_from_dict(data)
        self.assertEqual(0, config.interval)
        self.assertFalse(config.manage_records)

    def test_trailing_dot_domain(self):
        config = config_from_dict(dict(BASE, domain_name='unit.tests.'))
        self.assertEqual('unit.tests', config.domain_name)
        self.assertEqual('home.unit.tests', config.record_name)

    def test_lookup_table(self):
        config = config_from_dict(
            dict(
                BASE,
                lookup={
                    'ipv4_url': 'https://v4.unit.tests',
                    'timeout': 2.5,
                    'retries': 0,
                },
            )
        )
        self.assertEqual('https://v4.unit.tests', config.lookup.ipv4_url)
        self.assertEqual(LookupConfig().ipv6_url, config.lookup.ipv6_url)
        self.assertEqual(2.5, config.lookup.timeout)
        self.assertEqual(0, config.lookup.retries)

    def test_missing_key(self):
        for key in ('domain_name', 'api_key', 'record_name'):
            data = dict(BASE)
            del data[key]
            with self.assertRaises(ConfigException) as ctx:
                config_from_dict(data)
            self.assertIn(key, str(ctx.exception))

    def test_invalid_values(self):
        for key, value in (
            ('interval', '60'),
            ('interval', True),
            ('interval', -1),
            ('manage_records', 'yes'),
            ('manage_records', 1),
            ('record_name', ''),
            ('lookup', 'nope'),
        ):
            with self.assertRaises(ConfigException, msg=(key, value)):
                config_from_dict(dict(BASE, **{key: value}))

    def test_invalid_lookup_values(self):
        for key, value in (('retries', -1), ('timeout', 'soon')):
            with self.assertRaises(ConfigException, msg=(key, value)):
                config_from_dict(dict(BASE, lookup={key: value}))

    def test_repr_hides_api_key(self):
        self.assertNotIn('secret', repr(config_from_dict(BASE)))


class TestLoadConfig(TestCase):
    def test_load(self):
        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'config.toml')
            with open(path, 'w') as fh:
                fh.write(
                    'domain_name = "unit.tests"\n'
                    'api_key = "secret"\n'
                    'record_name = "@"\n'
                    'interval = 60\n'
                    'manage_records = false\n'
                    '\n'
                    '[lookup]\n'
                    'retries = 5\n'
                )
            config = load_config(path)
        self.assertEqual('unit.tests.', config.record_name)
        self.assertEqual(60, config.interval)
        self.assertFalse(config.manage_records)
        self.assertEqual(5, config.lookup.retries)

    def test_missing_file(self):
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigException) as ctx:
                load_config(os.path.join(tmpdir, 'missing.toml'))
        self.assertIn('not found', str(ctx.exception))

    def test_invalid_toml(self):
        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'config.toml')
            with open(path, 'w') as fh:
                fh.write('domain_name = \n')
            with self.assertRaises(ConfigException) as ctx:
                load_config(path)
        self.assertIn('not valid TOML', str(ctx.exception))
