"""
corvus.envelope
~~~~~~~~~~~~~~~

Serialization of events into the envelope wire format: three JSON
documents separated by newlines.

    {"event_id":"..."}
    {"type":"event","length":42}
    {"message":"...","event_id":"...","tags":{...}}

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from corvus.exceptions import EncodingFailed, EnvelopeError
from corvus.utils import json

__all__ = ('encode', 'decode', 'CONTENT_TYPE')

CONTENT_TYPE = 'application/x-sentry-envelope'

ITEM_TYPE = 'event'


def _dumps(value):
    return json.dumps(value).encode('utf-8')


def encode(event):
    try:
        # the item header needs the payload's byte length, so the payload
        # is serialized first
        payload = _dumps(event.to_payload())
        header = _dumps({'event_id': event.event_id})
        item_header = _dumps({'type': ITEM_TYPE, 'length': len(payload)})
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingFailed(
            'Unable to encode event %s: %s' % (event.event_id, e),
            event_id=event.event_id)

    return b'\n'.join((header, item_header, payload))


def decode(data):
    """
    Splits an envelope back into its ``(header, item_header, payload)``
    documents, checking the declared payload length.
    """
    try:
        header, item_header, payload = data.split(b'\n', 2)
    except ValueError:
        raise EnvelopeError('Envelope must contain three newline separated parts')

    try:
        header = json.loads(header)
        item_header = json.loads(item_header)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise EnvelopeError('Invalid envelope header: %s' % (e,))

    length = item_header.get('length')
    if length != len(payload):
        raise EnvelopeError('Item header declares %r bytes but payload has %d' % (
            length, len(payload)))

    try:
        payload = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise EnvelopeError('Invalid envelope payload: %s' % (e,))

    return header, item_header, payload
