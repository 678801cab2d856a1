"""
corvus.transport
~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.transport.base import Transport, AsyncTransport, FlushResult  # NOQA
from corvus.transport.exceptions import TransportFailed  # NOQA
from corvus.transport.http import HTTPTransport  # NOQA
from corvus.transport.requests import RequestsHTTPTransport  # NOQA
from corvus.transport.threaded import ThreadedTransport, ThreadedHTTPTransport  # NOQA
from corvus.transport.threaded_requests import ThreadedRequestsHTTPTransport  # NOQA
