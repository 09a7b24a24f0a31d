#!/usr/bin/env python
#
# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from setuptools import (
    find_packages,
    setup,
    )


__version__ = '0.1.0'

setup(
    name='pomo',
    version=__version__,
    packages=find_packages('lib'),
    package_dir={'': 'lib'},
    package_data={
        'pomo.config': ['*.conf', '*/*.conf'],
        },
    zip_safe=False,
    maintainer='Launchpad Translations Developers',
    description=(
        'Parse and write gettext PO text catalogs and decode compiled '
        'MO binaries.'),
    license='Affero GPL v3',
    python_requires='>=3.6',
    # this list should only contain direct dependencies--things imported.
    install_requires=[
        'lazr.config',
        'lazr.enum',
        'zope.interface',
    ],
    extras_require=dict(
        test=[
            'fixtures',
            'testtools',
        ],
    ),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Localization",
    ],
)
