"""
corvus.utils.json
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import datetime
import uuid
import json

JSONDecodeError = json.JSONDecodeError


class BetterJSONEncoder(json.JSONEncoder):
    """
    Knows a handful of common types beyond what :mod:`json` handles.
    Anything else raises ``TypeError`` rather than being coerced, so
    unserializable events are reported instead of silently mangled.
    """
    ENCODER_BY_TYPE = {
        uuid.UUID: lambda o: o.hex,
        datetime.datetime: lambda o: o.strftime('%Y-%m-%dT%H:%M:%SZ'),
        datetime.date: lambda o: o.isoformat(),
        set: list,
        frozenset: list,
        bytes: lambda o: o.decode('utf-8', errors='replace')
    }

    def default(self, obj):
        try:
            encoder = self.ENCODER_BY_TYPE[type(obj)]
        except KeyError:
            return super(BetterJSONEncoder, self).default(obj)
        return encoder(obj)


def dumps(value, **kwargs):
    kwargs.setdefault('separators', (',', ':'))
    kwargs.setdefault('ensure_ascii', False)
    return json.dumps(value, cls=BetterJSONEncoder, allow_nan=False, **kwargs)


def loads(value, **kwargs):
    if isinstance(value, bytes):
        value = value.decode('utf-8')
    return json.loads(value, **kwargs)
