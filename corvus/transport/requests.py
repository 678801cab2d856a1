"""
corvus.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.conf import defaults
from corvus.transport.base import FLUSHED
from corvus.transport.exceptions import TransportFailed
from corvus.transport.http import HTTPTransport

try:
    import requests
    has_requests = True
except ImportError:
    has_requests = False


class RequestsHTTPTransport(HTTPTransport):
    """
    Sends envelopes through a :class:`requests.Session` owned by the
    transport. Pass ``session`` to share one with the application.
    """

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=None, session=None):
        if not has_requests:
            raise ImportError('RequestsHTTPTransport requires requests.')

        super(RequestsHTTPTransport, self).__init__(timeout=timeout,
                                                    verify_ssl=verify_ssl,
                                                    ca_certs=ca_certs)
        if session is None:
            session = requests.Session()
        self.session = session

    def send(self, url, data, headers):
        verify = self.verify_ssl
        if verify and self.ca_certs:
            # If SSL verification is enabled use the provided CA bundle to
            # perform the verification.
            verify = self.ca_certs

        try:
            response = self.session.post(url, data=data, headers=headers,
                                         verify=verify, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailed(str(e), url=url)

        response.close()
        return response.status_code

    def close(self, timeout=None):
        self.session.close()
        return FLUSHED
