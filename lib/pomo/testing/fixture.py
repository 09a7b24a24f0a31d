# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""pomo test fixtures."""

__all__ = [
    'ConfigFixture',
    ]

from itertools import count
from textwrap import dedent

from fixtures import Fixture

from pomo.config import config


_overlay_names = count(1)


class ConfigFixture(Fixture):
    """A fixture that pushes a config overlay, and pops it afterwards.

    :param conf_data: A snippet of lazr.config data, e.g.
        "[mofile]\\nstring_encoding: latin-1".
    """

    def __init__(self, conf_data):
        super(ConfigFixture, self).__init__()
        self.conf_data = dedent(conf_data)
        self.name = 'test-overlay-%d' % next(_overlay_names)

    def setUp(self):
        super(ConfigFixture, self).setUp()
        config.push(self.name, self.conf_data)
        self.addCleanup(config.pop, self.name)
