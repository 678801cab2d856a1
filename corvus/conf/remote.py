"""
corvus.conf.remote
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from urllib.parse import urlsplit

from corvus.exceptions import DsnInvalid, DsnMalformed, DsnMissing

ERR_MISSING = 'No Sentry DSN was configured'
ERR_MALFORMED = 'Sentry DSN is not a valid URL: %r (%s)'
ERR_INVALID = 'Invalid Sentry DSN: %r (%s)'

ENVELOPE_URL = '%s://%s:%s/api/%s/envelope/'


class Dsn(object):
    """
    The parsed form of a DSN. Instances are read-only.

    ``envelope_url`` is always ``{scheme}://{host}:{port}/api/{project}/envelope/``;
    the port falls back to 443 for ``https`` schemes and 80 otherwise.
    """

    __slots__ = ('raw', 'scheme', 'host', 'port', 'project', 'public_key',
                 'secret_key', 'envelope_url')

    def __init__(self, scheme, host, project, public_key, port=None,
                 secret_key=None, raw=None):
        if port is None:
            port = 443 if scheme.startswith('https') else 80

        netloc = host
        if ':' in netloc:
            # IPv6 literal
            netloc = '[%s]' % (netloc,)

        set_ = super(Dsn, self).__setattr__
        set_('raw', raw)
        set_('scheme', scheme)
        set_('host', host)
        set_('port', int(port))
        set_('project', project)
        set_('public_key', public_key)
        set_('secret_key', secret_key)
        set_('envelope_url', ENVELOPE_URL % (scheme, netloc, port, project))

    def __setattr__(self, name, value):
        raise AttributeError('Dsn is immutable')

    def __delattr__(self, name):
        raise AttributeError('Dsn is immutable')

    def __eq__(self, other):
        if not isinstance(other, Dsn):
            return NotImplemented
        return (self.public_key, self.envelope_url) == (other.public_key, other.envelope_url)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.public_key, self.envelope_url))

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, self.envelope_url)

    @classmethod
    def from_string(cls, value):
        if value is None:
            raise DsnMissing(ERR_MISSING)

        if not isinstance(value, str):
            raise DsnMalformed(ERR_MALFORMED % (value, 'not a string'), dsn=value)

        # trailing newlines are common when the DSN comes from a file or
        # an environment variable
        value = value.strip()
        if not value:
            raise DsnMissing(ERR_MISSING, dsn=value)

        if any(c.isspace() for c in value):
            raise DsnMalformed(ERR_MALFORMED % (value, 'contains whitespace'), dsn=value)

        try:
            url = urlsplit(value)
            port = url.port
            host = url.hostname
        except ValueError as e:
            raise DsnMalformed(ERR_MALFORMED % (value, e), dsn=value)

        scheme = url.scheme
        if not scheme or not scheme.startswith('http'):
            raise DsnInvalid(ERR_INVALID % (value, 'unsupported scheme'), dsn=value)

        if not host:
            raise DsnInvalid(ERR_INVALID % (value, 'missing host'), dsn=value)

        # ``key,secret@`` is the envelope form, ``key:secret@`` the classic one
        userinfo = url.username
        if not userinfo:
            raise DsnInvalid(ERR_INVALID % (value, 'missing public key'), dsn=value)

        key_bits = userinfo.split(',', 1)
        public_key = key_bits[0]
        if not public_key:
            raise DsnInvalid(ERR_INVALID % (value, 'missing public key'), dsn=value)

        if len(key_bits) > 1:
            secret_key = key_bits[1] or None
        else:
            secret_key = url.password or None

        project = url.path.rsplit('/', 1)[-1]
        if not project:
            raise DsnInvalid(ERR_INVALID % (value, 'missing project id'), dsn=value)

        try:
            return cls(
                scheme=scheme,
                host=host,
                port=port,
                project=project,
                public_key=public_key,
                secret_key=secret_key,
                raw=value,
            )
        except (TypeError, ValueError) as e:
            raise DsnInvalid(ERR_INVALID % (value, e), dsn=value)
