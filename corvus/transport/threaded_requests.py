"""
corvus.transport.threaded_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.transport.requests import RequestsHTTPTransport
from corvus.transport.threaded import ThreadedTransport


class ThreadedRequestsHTTPTransport(ThreadedTransport, RequestsHTTPTransport):
    pass
