"""
corvus.transport.base
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from collections import namedtuple


class FlushResult(namedtuple('FlushResult', ('flushed', 'pending'))):
    """
    Outcome of waiting on queued envelopes: ``flushed`` is True when
    nothing is left, otherwise ``pending`` envelopes were abandoned.
    """
    __slots__ = ()

    def __bool__(self):
        return self.flushed


FLUSHED = FlushResult(True, 0)


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement a send method (or an async_send method if
    sub-classing AsyncTransport). Transports are not bound to a URL;
    the client passes the envelope endpoint with every call.
    """

    is_async = False

    def send(self, url, data, headers):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server. Returns the HTTP
        status code of the response.
        """
        raise NotImplementedError

    def flush(self, timeout=None):
        return FLUSHED

    def close(self, timeout=None):
        return FLUSHED


class AsyncTransport(Transport):
    """
    All asynchronous transport implementations should subclass this
    class.

    You must implement a async_send method.
    """

    is_async = True

    def async_send(self, url, data, headers, success_cb, failure_cb):
        """
        Override this method for asynchronous transports. Call
        `success_cb(status_code)` if the request completes or
        `failure_cb(exception)` if the send fails.
        """
        raise NotImplementedError
