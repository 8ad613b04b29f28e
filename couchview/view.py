# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Query a single CouchDB view.

>>> view = View('dependedUpon')
>>> view.url({'group_level': 1})
'https://skimdb.npmjs.com/registry/_design/app/_view/dependedUpon?group_level=1'

Rows can either be collected in one go from a coroutine:

>>> result = await view.query(encode_options(startkey=['micromatch'],
...                                          endkey=['micromatch', {}],
...                                          group_level=2))   #doctest: +SKIP

or consumed while they arrive, with plain or asynchronous iteration:

>>> for row in view.stream({'limit': 10}):   #doctest: +SKIP
...     print(row['key'])
"""
import asyncio
import json
import logging
import threading

import furl

from couchview import exceptions
from couchview.config import DEFAULT_CONFIG
from couchview.results import ViewResult
from couchview.rows import extract, HEADER, ROW, FOOTER
from couchview.session import Session

__all__ = ['View', 'RowStream', 'encode_options']
__docformat__ = 'restructuredtext en'

log = logging.getLogger(__name__)

# Options whose values are view keys, and so always travel JSON-encoded.
JSON_OPTIONS = frozenset(['key', 'keys', 'startkey', 'endkey', 'start_key', 'end_key'])

_ERROR = 'error'
_END = 'end'

# Events held between the reading thread and an `async for` consumer.
STREAM_BUFFER_SIZE = 64


def _jsons(data):
    """Convert data into JSON string."""
    return json.dumps(data, ensure_ascii=False)


def encode_options(**options):
    """Turn keyword view options into query parameters.

    Keys (``key``, ``keys``, ``startkey``, ``endkey``) are always JSON-encoded,
    as are booleans and numbers; other strings are left alone and options set
    to `None` are dropped.

    >>> encode_options(startkey=['micromatch'], group_level=2, stale='ok')
    {'startkey': '["micromatch"]', 'group_level': '2', 'stale': 'ok'}
    """
    params = {}
    for name, value in options.items():
        if value is None:
            continue
        if name in JSON_OPTIONS or not isinstance(value, str):
            value = _jsons(value)
        params[name] = value
    return params


def _pump(events, handoff):
    """Drain `events` on a worker thread, passing each one to `handoff`.

    The last handoff is always either ``(_END, None)`` or ``(_ERROR, exc)``,
    unless `handoff` returns false, in which case reading stops right away.
    """
    try:
        for kind, value in events:
            if not handoff(kind, value):
                events.close()
                return
    except Exception as exc:
        handoff(_ERROR, exc)
    else:
        handoff(_END, None)


class View(object):
    """Representation of a view in the design document of a CouchDB database.

    >>> view = View('byKeyword')
    >>> view.config.pathname
    '/registry/_design/app/_view/byKeyword'

    :param name: the name of the view, used as is
    :param config: the `ViewConfig` to start from; it is cloned, never modified.
                   Defaults to `DEFAULT_CONFIG`.
    :param session: an optional `Session` shared by all requests of this view.
                    Without one, every query opens and closes its own.
    """

    def __init__(self, name, config=None, session=None):
        self.name = name
        self.config = (config or DEFAULT_CONFIG).clone()
        self.config.pathname += '/_view/%s' % (name,)
        self._session = session

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.name)

    def url(self, params=None):
        """Build the URL of this view with `params` as its query string.

        Values are passed along as given; use `encode_options` for keys that
        must be JSON.
        """
        return furl.furl().set(
            scheme=self.config.protocol,
            host=self.config.host,
            port=self.config.port,
            path=self.config.pathname,
            args=params or {},
        ).url

    async def query(self, params=None):
        """Query the view and collect every row.

        :param params: URL query parameters to pass along to the view
        :return: the rows, in the order the server sent them
        :rtype: `ViewResult`
        :raise ViewHeaderError: if the server answered with an error descriptor
        :raise RequestsException: if the request or reading the body failed
        :raise ParseError: if the body is not a valid view response
        """
        url = self.url(params)
        loop = asyncio.get_running_loop()
        result = loop.create_future()
        rows = []
        fields = {}
        settled = threading.Event()

        def reject(exc):
            if not result.done():
                log.warning("Query of view %r failed: %s", self.name, exc)
                result.set_exception(exc)
                settled.set()

        def resolve():
            if not result.done():
                result.set_result(ViewResult(rows, fields.get('offset'), fields.get('total_rows'), fields))

        def deliver(kind, value):
            if kind == ROW:
                if not result.done():
                    rows.append(value)
            elif kind in (HEADER, FOOTER):
                fields.update(value)
                if value.get('error'):
                    reject(exceptions.ViewHeaderError(value['error'], value.get('reason')))
            elif kind == _ERROR:
                reject(value)
            else:
                resolve()

        def handoff(kind, value):
            if settled.is_set():
                return False
            loop.call_soon_threadsafe(deliver, kind, value)
            return True

        loop.run_in_executor(None, _pump, self._events(url), handoff)
        return await result

    def stream(self, params=None):
        """Query the view and return its rows as they arrive.

        Nothing is requested until the returned `RowStream` is iterated.
        Unlike `query`, an error descriptor from the server is not raised;
        it ends the stream and can be found in `RowStream.header`.

        :param params: URL query parameters to pass along to the view
        :rtype: `RowStream`
        """
        return RowStream(self._events, self.url(params))

    def _events(self, url):
        session = self._session or Session()
        try:
            resp = session.get(url, stream=True)
            try:
                for event in extract(session.iter_body(resp)):
                    yield event
            finally:
                resp.close()
        finally:
            if self._session is None:
                session.close()
        log.debug("Finished reading %s", url)


class RowStream(object):
    """Rows of a view query, delivered while the response is being read.

    Iterate it once, either with ``for`` (blocking, in the calling thread) or
    with ``async for`` (the response is read on a worker thread, which waits
    whenever `buffer_size` events are pending; leaving the loop early stops
    the reading). Fields of the response outside of ``rows`` end up in
    `header` and `footer`.
    """

    def __init__(self, source, url, buffer_size=STREAM_BUFFER_SIZE):
        self.url = url
        self.buffer_size = buffer_size
        self.header = {}
        self.footer = {}
        self._source = source
        self._consumed = False

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.url)

    def _claim(self):
        if self._consumed:
            raise exceptions.StreamConsumed("Rows of %s were already consumed" % self.url)
        self._consumed = True
        return self._source(self.url)

    def _take(self, kind, value):
        if kind == HEADER:
            self.header.update(value)
        elif kind == FOOTER:
            self.footer.update(value)

    def __iter__(self):
        events = self._claim()
        return self._iterate(events)

    def _iterate(self, events):
        for kind, value in events:
            if kind == ROW:
                yield value
            else:
                self._take(kind, value)

    def __aiter__(self):
        events = self._claim()
        return self._aiterate(events)

    async def _aiterate(self, events):
        loop = asyncio.get_running_loop()
        queue = asyncio.Queue(maxsize=self.buffer_size)
        stopped = threading.Event()

        def handoff(kind, value):
            if stopped.is_set():
                return False
            asyncio.run_coroutine_threadsafe(queue.put((kind, value)), loop).result()
            return not stopped.is_set()

        loop.run_in_executor(None, _pump, events, handoff)
        try:
            while True:
                kind, value = await queue.get()
                if kind == ROW:
                    yield value
                elif kind == _ERROR:
                    raise value
                elif kind == _END:
                    return
                else:
                    self._take(kind, value)
        finally:
            stopped.set()
            # Unblock a worker waiting on a full queue so it can notice.
            while not queue.empty():
                queue.get_nowait()
