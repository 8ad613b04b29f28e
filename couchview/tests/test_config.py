# -*- coding: utf-8 -*-

import unittest

from couchview.config import DEFAULT_CONFIG, ViewConfig


class ViewConfigTestCase(unittest.TestCase):

    def test_from_url(self):
        config = ViewConfig.from_url('http://localhost:5984/registry/_design/app')
        self.assertEqual(config.protocol, 'http')
        self.assertEqual(config.host, 'localhost')
        self.assertEqual(config.port, 5984)
        self.assertEqual(config.pathname, '/registry/_design/app')

    def test_from_url_trailing_slash(self):
        config = ViewConfig.from_url('http://localhost:5984/registry/_design/app/')
        self.assertEqual(config.pathname, '/registry/_design/app')

    def test_from_url_without_host(self):
        self.assertRaises(ValueError, ViewConfig.from_url, '/registry/_design/app')

    def test_root_url(self):
        self.assertEqual(ViewConfig('http', 'localhost', 5984).root_url, 'http://localhost:5984')
        self.assertEqual(ViewConfig('https', 'example.com', 443).root_url, 'https://example.com')

    def test_clone_is_equal(self):
        config = ViewConfig('http', 'localhost', 5984, '/db')
        clone = config.clone()
        self.assertIsNot(clone, config)
        self.assertEqual(clone, config)

    def test_clone_is_independent(self):
        config = ViewConfig('http', 'localhost', 5984, '/db')
        clone = config.clone()
        clone.pathname += '/_view/x'
        clone.host = 'example.com'
        self.assertEqual(config.pathname, '/db')
        self.assertEqual(config.host, 'localhost')
        self.assertNotEqual(clone, config)

    def test_default_config(self):
        self.assertIsInstance(DEFAULT_CONFIG, ViewConfig)
        self.assertTrue(DEFAULT_CONFIG.host)

    def test_repr(self):
        config = ViewConfig('http', 'localhost', 5984, '/db')
        self.assertEqual(repr(config), '<ViewConfig http://localhost:5984/db>')
