# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Incremental extraction of view rows from a JSON response body.

A view response looks like ``{"total_rows": 2, "offset": 0, "rows": [...]}``.
`RowExtractor` is fed the body chunk by chunk and hands back events as soon
as they are complete, so only one row at a time is ever held in memory:

>>> extractor = RowExtractor()
>>> extractor.feed(b'{"total_rows": 2, "rows": [{"id": "a"}, {"id"')
[('header', {'total_rows': 2}), ('data', {'id': 'a'})]
>>> extractor.feed(b': "b"}]}')
[('data', {'id': 'b'})]
>>> extractor.close()
[]

Fields outside of ``rows`` are never interpreted here; an error descriptor
such as ``{"error": "not_found"}`` simply shows up in the header.
"""
import decimal

import ijson
from ijson.common import ObjectBuilder

from couchview import exceptions

__all__ = ['RowExtractor', 'extract', 'HEADER', 'ROW', 'FOOTER']


HEADER = 'header'
ROW = 'data'
FOOTER = 'footer'

_NESTING = {
    'start_map': 1,
    'start_array': 1,
    'end_map': -1,
    'end_array': -1,
}


class RowExtractor(object):
    """Push parser emitting ``(kind, value)`` events for one view response.

    :param path: the top-level key holding the array of rows
    """

    def __init__(self, path='rows'):
        self.path = path
        self._pending = ijson.sendable_list()
        self._parser = ijson.parse_coro(self._pending)
        self._started = False
        self._in_rows = False
        self._seen_rows = False
        self._key = None
        self._builder = None
        self._nesting = 0
        self._header = {}
        self._header_sent = False
        self._footer = {}

    def feed(self, chunk):
        """Parse the next chunk of the body and return the completed events."""
        if not chunk:
            return []
        try:
            self._parser.send(chunk)
        except ijson.JSONError as exc:
            raise exceptions.ParseError("Malformed view response: %s" % exc) from exc
        return self._drain()

    def close(self):
        """Signal the end of the body and return the remaining events."""
        try:
            self._parser.close()
        except ijson.JSONError as exc:
            raise exceptions.ParseError("Malformed view response: %s" % exc) from exc
        events = self._drain()
        if not self._started:
            raise exceptions.ParseError("Empty view response")
        if not self._header_sent:
            self._send_header(events)
        if self._footer:
            events.append((FOOTER, dict(self._footer)))
        return events

    def _drain(self):
        events = []
        for _, event, value in self._pending:
            self._handle(event, value, events)
        del self._pending[:]
        return events

    def _handle(self, event, value, events):
        if self._builder is not None:
            self._builder.event(event, value)
            self._nesting += _NESTING.get(event, 0)
            if self._nesting == 0:
                self._finish(events)
        elif not self._started:
            if event != 'start_map':
                raise exceptions.ParseError("View response is not a JSON object")
            self._started = True
        elif self._in_rows:
            if event == 'end_array':
                self._in_rows = False
            else:
                self._begin(event, value, events)
        elif event == 'map_key':
            self._key = value
        elif event == 'end_map':
            pass
        elif self._key == self.path and event == 'start_array' and not self._seen_rows:
            self._in_rows = self._seen_rows = True
            self._send_header(events)
        else:
            self._begin(event, value, events)

    def _begin(self, event, value, events):
        self._builder = ObjectBuilder()
        self._builder.event(event, value)
        self._nesting = _NESTING.get(event, 0)
        if self._nesting == 0:
            self._finish(events)

    def _finish(self, events):
        value = _plain(self._builder.value)
        self._builder = None
        if self._in_rows:
            events.append((ROW, value))
        elif self._header_sent:
            self._footer[self._key] = value
        else:
            self._header[self._key] = value

    def _send_header(self, events):
        self._header_sent = True
        events.append((HEADER, dict(self._header)))


def _plain(value):
    """Turn the `Decimal` numbers ijson produces into floats, leaving integers alone."""
    if isinstance(value, decimal.Decimal):
        return float(value)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def extract(chunks, path='rows'):
    """Yield the events of a body given as an iterable of byte chunks."""
    extractor = RowExtractor(path)
    for chunk in chunks:
        for event in extractor.feed(chunk):
            yield event
    for event in extractor.close():
        yield event
