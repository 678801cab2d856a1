"""
corvus.transport.exceptions
~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.exceptions import CorvusError


class TransportFailed(CorvusError):
    """
    Raised by a transport when the request could not be completed at all
    (connection refused, timeout, TLS failure, ...).
    """

    def __init__(self, message, url=None):
        super(TransportFailed, self).__init__(message)
        self.message = message
        self.url = url

    def __str__(self):
        if self.url:
            return '%s (url: %s)' % (self.message, self.url)
        return self.message
