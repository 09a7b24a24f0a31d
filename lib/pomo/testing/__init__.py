# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Test helpers for pomo."""

__all__ = [
    'TestCase',
    ]

import logging

import fixtures
import testtools
from zope.interface.verify import verifyObject


class TestCase(testtools.TestCase, fixtures.TestWithFixtures):
    """Provide pomo-specific test facilities."""

    def __str__(self):
        """The string representation of a test is its id."""
        return self.id()

    def assertProvides(self, obj, interface):
        """Assert 'obj' correctly provides 'interface'."""
        self.assertTrue(
            interface.providedBy(obj),
            "%r does not provide %r." % (obj, interface))
        self.assertTrue(verifyObject(interface, obj))

    def useFakeLogger(self, name='pomo'):
        """Capture everything logged below `name` for this test."""
        return self.useFixture(
            fixtures.FakeLogger(name=name, level=logging.DEBUG))
