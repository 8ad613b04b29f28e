#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from setuptools import setup

setup(
    name='CouchView',
    version='1.0.0',
    description='Python library for querying CouchDB views',
    long_description="""
    This is a Python library for querying a single CouchDB view. Rows can be
    collected from a coroutine or streamed while the response is read.""",
    license = 'BSD',
    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = ['couchview', 'couchview.tests'],
    python_requires='>=3.8',
    install_requires=[
        "furl",
        "ijson>=3.1",
        "requests",
        "requests_toolbelt",
    ],
    test_suite='couchview.tests.__main__.suite',
    zip_safe=True,
)
