"""
corvus.utils.testutils
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2013 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from exam import Exam

from unittest import TestCase as BaseTestCase

from corvus.transport.base import Transport


class TestCase(Exam, BaseTestCase):
    pass


class InMemoryTransport(Transport):
    """
    Keeps every envelope it is handed instead of sending it.

    >>> transport = InMemoryTransport()
    >>> client = Client(dsn, transport=transport)
    >>> client.captureMessage('foo')
    >>> url, data, headers = transport.events[0]
    """

    def __init__(self, status=200):
        self.events = []
        self.status = status

    def send(self, url, data, headers):
        self.events.append((url, data, headers))
        return self.status
