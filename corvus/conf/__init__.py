"""
corvus.conf
~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.conf.remote import Dsn

__all__ = ('load',)


def load(dsn):
    """
    Parses a Sentry compatible DSN.

    >>> import corvus

    >>> dsn = 'https://public_key@sentry.local/project_id'

    >>> config = corvus.load(dsn)
    >>> config.envelope_url
    'https://sentry.local:443/api/project_id/envelope/'
    """
    return Dsn.from_string(dsn)
