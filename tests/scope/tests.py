from corvus.events import Event
from corvus.scope import Scope, merge_scope, merge_tags
from corvus.utils.testutils import TestCase


class MergeScopeTest(TestCase):
    def test_event_wins_on_conflict(self):
        event = Event('foo', tags={'a': '1'})
        scope = Scope(tags={'a': '2', 'b': '3'})

        merged = merge_scope(event, scope)

        assert merged.tags == {'a': '1', 'b': '3'}

    def test_event_without_tags_adopts_scope_tags(self):
        event = Event('foo')
        scope = Scope(tags={'b': '3'})

        merged = merge_scope(event, scope)

        assert merged.tags == {'b': '3'}
        # the scope keeps its own copy
        merged.tags['c'] = '4'
        assert scope.tags == {'b': '3'}

    def test_no_scope(self):
        event = Event('foo', tags={'a': '1'})
        assert merge_scope(event, None).tags == {'a': '1'}

    def test_empty_scope_leaves_missing_tags_alone(self):
        event = Event('foo')
        assert merge_scope(event, Scope()).tags is None

    def test_merge_tags(self):
        event = Event('foo', tags={'a': '1'})
        merge_tags(event, {'a': 'x', 'z': '26'})
        assert event.tags == {'a': '1', 'z': '26'}


class ScopeTest(TestCase):
    def test_set_tag(self):
        scope = Scope()
        scope.set_tag('a', '1')
        assert scope.tags == {'a': '1'}

    def test_add_event_processor_keeps_order(self):
        first = lambda event: event
        second = lambda event: event
        scope = Scope(event_processors=[first])
        scope.add_event_processor(second)
        assert scope.event_processors == [first, second]

    def test_apply_to_event(self):
        scope = Scope(tags={'a': '2'})
        event = scope.apply_to_event(Event('foo'))
        assert event.tags == {'a': '2'}
