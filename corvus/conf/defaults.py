"""
corvus.conf.defaults
~~~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

# Environment variable consulted when no DSN is passed explicitly
DSN_ENV_VAR = 'SENTRY_DSN'

# Seconds to wait on a single HTTP request
TIMEOUT = 1

# Seconds ``Client.close`` waits for queued envelopes before giving up
SHUTDOWN_TIMEOUT = 2

# Envelope protocol version sent in the auth header
PROTOCOL_VERSION = '6'

CLIENT_NAME = 'corvus'

# Client-side event processors applied to every event after the scope's
# own processors
PROCESSORS = ()
