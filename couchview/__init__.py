# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from couchview import exceptions
from couchview.config import DEFAULT_CONFIG, ViewConfig
from couchview.results import ViewResult
from couchview.view import RowStream, View, encode_options

__version__ = '1.0.0'
