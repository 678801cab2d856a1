"""
corvus.processors
~~~~~~~~~~~~~~~~~

Event processors receive an event and return it (possibly modified), or
``None`` to drop it. Plain callables with the same signature are accepted
anywhere a processor is.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import re
from collections import namedtuple

from corvus.utils import varmap

__all__ = ('Processor', 'SanitizePasswordsProcessor', 'Kept', 'Dropped',
           'apply_processors', 'apply_send_filter')


class Kept(namedtuple('Kept', ('event',))):
    __slots__ = ()
    dropped = False


class Dropped(namedtuple('Dropped', ('by',))):
    __slots__ = ()
    dropped = True
    event = None


def run_processor(processor, event):
    process = getattr(processor, 'process', None)
    if process is None:
        return processor(event)
    return process(event)


def apply_processors(event, processors):
    """
    Runs ``processors`` in order, each one receiving the event returned by
    the previous one. The first processor to return ``None`` stops the
    chain.
    """
    for processor in processors or ():
        event = run_processor(processor, event)
        if event is None:
            return Dropped(processor)
    return Kept(event)


def apply_send_filter(event, before_send):
    if before_send is None:
        return Kept(event)

    event = run_processor(before_send, event)
    if event is None:
        return Dropped(before_send)
    return Kept(event)


class Processor(object):
    def get_data(self, event):
        return

    def process(self, event):
        resp = self.get_data(event)
        if resp is not None:
            event = resp

        if event.tags:
            event.tags = self.filter_tags(event.tags)

        if event.data:
            event.data = self.filter_data(event.data)

        return event

    def filter_tags(self, tags):
        return tags

    def filter_data(self, data):
        return data


class SanitizePasswordsProcessor(Processor):
    """
    Asterisk out things that look like passwords, credit card numbers,
    and API keys in tags and event attributes.
    """

    MASK = '*' * 8
    FIELDS = frozenset([
        'password',
        'secret',
        'passwd',
        'authorization',
        'api_key',
        'apikey',
        'sentry_dsn',
        'access_token',
    ])
    VALUES_RE = re.compile(r'^(?:\d[ -]*?){13,16}$')

    def sanitize(self, key, value):
        if value is None:
            return

        if isinstance(value, str) and self.VALUES_RE.match(value):
            return self.MASK

        if not key:  # key can be a NoneType
            return value

        # Just in case we have bytes here, we want to make them into text
        # properly without failing so we can perform our check.
        if isinstance(key, bytes):
            key = key.decode('utf-8', 'replace')
        else:
            key = str(key)

        key = key.lower()
        for field in self.FIELDS:
            if field in key:
                # store mask as a fixed length for security
                return self.MASK
        return value

    def filter_tags(self, tags):
        return dict((k, self.sanitize(k, v)) for k, v in tags.items())

    def filter_data(self, data):
        return varmap(self.sanitize, data)
