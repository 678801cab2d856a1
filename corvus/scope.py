"""
corvus.scope
~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('Scope', 'merge_scope', 'merge_tags')


def merge_tags(event, tags):
    """
    Copies ``tags`` into ``event.tags`` without overwriting keys the event
    already carries.
    """
    if not tags:
        return event

    if event.tags is None:
        event.tags = dict(tags)
        return event

    for key, value in tags.items():
        if key not in event.tags:
            event.tags[key] = value
    return event


def merge_scope(event, scope):
    if scope is None:
        return event
    return merge_tags(event, scope.tags)


class Scope(object):
    """
    Contextual data applied to an event at capture time.

    >>> scope = Scope(tags={'transaction': 'checkout'})
    >>> scope.add_event_processor(drop_health_checks)
    >>> client.capture(event, scope=scope)
    """

    def __init__(self, tags=None, event_processors=None):
        self.tags = dict(tags or {})
        self.event_processors = list(event_processors or [])

    def set_tag(self, key, value):
        self.tags[key] = value

    def add_event_processor(self, processor):
        self.event_processors.append(processor)

    def apply_to_event(self, event):
        return merge_scope(event, self)

    def __repr__(self):
        return '<%s: tags=%r processors=%d>' % (
            type(self).__name__, self.tags, len(self.event_processors))
