# -*- coding: utf-8 -*-

import unittest
import couchview


class TestPackage(unittest.TestCase):

    def test_exports(self):
        expected = set([
            # couchview.view
            'View', 'RowStream', 'encode_options',
            # couchview.config
            'ViewConfig', 'DEFAULT_CONFIG',
            # couchview.results
            'ViewResult',
            'exceptions',
        ])
        exported = set(e for e in dir(couchview) if not e.startswith('_'))
        self.assertTrue(expected <= exported)
