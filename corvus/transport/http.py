"""
corvus.transport.http
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import ssl
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from corvus.conf import defaults
from corvus.transport.base import Transport
from corvus.transport.exceptions import TransportFailed


class HTTPTransport(Transport):

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=None):
        if isinstance(timeout, str):
            timeout = int(timeout)
        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs

    def get_ssl_context(self):
        context = ssl.create_default_context(cafile=self.ca_certs)
        if not self.verify_ssl:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def send(self, url, data, headers):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(url, data=data, headers=headers or {}, method='POST')

        kwargs = {'timeout': self.timeout}
        if url.startswith('https'):
            kwargs['context'] = self.get_ssl_context()

        try:
            response = urlopen(req, **kwargs)
        except HTTPError as e:
            # a response arrived; the status is reported, not raised
            e.close()
            return e.code
        except (URLError, OSError) as e:
            raise TransportFailed(str(getattr(e, 'reason', e)), url=url)

        with response:
            response.read()
            return response.status
