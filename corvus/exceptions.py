"""
corvus.exceptions
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class CorvusError(Exception):
    pass


class ConfigurationError(CorvusError):
    """
    Raised while constructing a client. There is no usable client
    afterwards; callers can switch on ``kind``.
    """
    kind = 'configuration'

    def __init__(self, message, dsn=None):
        super(ConfigurationError, self).__init__(message)
        self.message = message
        self.dsn = dsn


class DsnMissing(ConfigurationError):
    kind = 'dsn_missing'


class DsnMalformed(ConfigurationError):
    kind = 'dsn_malformed'


class DsnInvalid(ConfigurationError):
    kind = 'dsn_invalid'


class EncodingFailed(CorvusError):
    """An event could not be serialized into an envelope."""

    def __init__(self, message, event_id=None):
        super(EncodingFailed, self).__init__(message)
        self.message = message
        self.event_id = event_id


class EnvelopeError(CorvusError):
    """A byte string could not be read back as an envelope."""
