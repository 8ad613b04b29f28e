# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Base connection descriptor shared by all views.

>>> config = ViewConfig.from_url('http://localhost:5984/registry/_design/app')
>>> config.host, config.port, config.pathname
('localhost', 5984, '/registry/_design/app')
>>> config.root_url
'http://localhost:5984'
"""
import copy
import os

import furl

__all__ = ['ViewConfig', 'DEFAULT_CONFIG', 'DEFAULT_URL']


DEFAULT_URL = os.environ.get('COUCHVIEW_URL', 'https://skimdb.npmjs.com/registry/_design/app')


class ViewConfig(object):
    """Where the views live: protocol, host, port and the design document path.

    Views never share an instance; each `View` works on its own `clone()`.
    """

    def __init__(self, protocol='https', host='localhost', port=None, pathname=''):
        self.protocol = protocol
        self.host = host
        self.port = port
        self.pathname = pathname

    @classmethod
    def from_url(cls, url):
        """Build a config from a base URL such as ``http://localhost:5984/db/_design/app``."""
        parsed_url = furl.furl(url)
        if not parsed_url.scheme or not parsed_url.host:
            raise ValueError("URL must contain a scheme and a host: %r" % url)
        return cls(
            protocol=parsed_url.scheme,
            host=parsed_url.host,
            port=parsed_url.port,
            pathname=str(parsed_url.path).rstrip('/'),
        )

    @property
    def root_url(self):
        return furl.furl().set(scheme=self.protocol, host=self.host, port=self.port).url

    def clone(self):
        """Return a deep copy; changing it leaves this config untouched."""
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, ViewConfig):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return '<%s %s%s>' % (type(self).__name__, self.root_url, self.pathname)


DEFAULT_CONFIG = ViewConfig.from_url(DEFAULT_URL)
