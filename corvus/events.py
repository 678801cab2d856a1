"""
corvus.events
~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import uuid

__all__ = ('Event',)


class Event(object):
    """
    A single diagnostic event.

    ``message`` and ``tags`` are understood by the client; any other
    keyword argument is carried along untouched and sent with the payload.

    >>> event = Event('Something happened', tags={'release': '1.0'},
    >>>               logger='billing')
    """

    def __init__(self, message=None, tags=None, event_id=None, **data):
        if event_id is None:
            event_id = uuid.uuid4()
        elif not isinstance(event_id, uuid.UUID):
            event_id = uuid.UUID(str(event_id))
        self._id = event_id
        self.message = message
        self.tags = dict(tags) if tags is not None else None
        self.data = data

    @property
    def id(self):
        return self._id

    @property
    def event_id(self):
        """The 32-length hex string identifying this event."""
        return self._id.hex

    def to_payload(self):
        payload = {
            'message': self.message,
            'event_id': self.event_id,
            'tags': self.tags,
        }
        for k, v in self.data.items():
            if k not in payload:
                payload[k] = v
        return payload

    def __repr__(self):
        return '<%s: %s %r>' % (type(self).__name__, self.event_id, self.message)
