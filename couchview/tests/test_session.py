# -*- coding: utf-8 -*-

import unittest
from unittest import mock

import requests.exceptions
from requests_toolbelt import sessions

from couchview import exceptions
from couchview.session import Session


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.session = Session()

    def tearDown(self):
        self.session.close()

    def test_get(self):
        resp = mock.Mock()
        with mock.patch.object(sessions.BaseUrlSession, 'request', return_value=resp) as request:
            self.assertIs(self.session.get('http://localhost:5984/db', stream=True), resp)
        request.assert_called_once_with('GET', 'http://localhost:5984/db', stream=True)
        resp.raise_for_status.assert_called_once_with()

    def test_connection_error(self):
        error = requests.exceptions.ConnectionError('connection refused')
        with mock.patch.object(sessions.BaseUrlSession, 'request', side_effect=error):
            with self.assertRaises(exceptions.RequestsException) as cm:
                self.session.get('http://localhost:5984/db')
        self.assertIs(cm.exception.__cause__, error)

    def test_timeout(self):
        error = requests.exceptions.ReadTimeout('too slow')
        with mock.patch.object(sessions.BaseUrlSession, 'request', side_effect=error):
            self.assertRaises(exceptions.Timeout, self.session.get, 'http://localhost:5984/db')

    def test_http_error(self):
        resp = mock.Mock(status_code=404, reason='Object Not Found')
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(response=resp)
        with mock.patch.object(sessions.BaseUrlSession, 'request', return_value=resp):
            with self.assertRaises(exceptions.HTTPNotFound) as cm:
                self.session.get('http://localhost:5984/db')
        self.assertEqual(cm.exception.status_code, 404)

    def test_http_error_unknown_status(self):
        resp = mock.Mock(status_code=503, reason='Service Unavailable')
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(response=resp)
        with mock.patch.object(sessions.BaseUrlSession, 'request', return_value=resp):
            with self.assertRaises(exceptions.HTTPError) as cm:
                self.session.get('http://localhost:5984/db')
        self.assertEqual(cm.exception.status_code, 503)
        self.assertEqual(cm.exception.message, 'Service Unavailable')

    def test_iter_body(self):
        resp = mock.Mock()
        resp.iter_content.return_value = iter([b'{"rows"', b'', b':[]}'])
        self.assertEqual(list(self.session.iter_body(resp, chunk_size=7)), [b'{"rows"', b':[]}'])
        resp.iter_content.assert_called_once_with(chunk_size=7)

    def test_iter_body_broken(self):
        def chunks(chunk_size):
            yield b'{"rows":['
            raise requests.exceptions.ChunkedEncodingError('connection reset')

        resp = mock.Mock()
        resp.iter_content.side_effect = chunks
        body = self.session.iter_body(resp)
        self.assertEqual(next(body), b'{"rows":[')
        self.assertRaises(exceptions.RequestsException, next, body)
