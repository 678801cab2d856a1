from mock import Mock

from corvus.events import Event
from corvus.processors import (
    Dropped, Kept, Processor, SanitizePasswordsProcessor, apply_processors,
    apply_send_filter)
from corvus.utils.testutils import TestCase


class CountingProcessor(Processor):
    def __init__(self, result=True):
        self.calls = 0
        self.result = result

    def process(self, event):
        self.calls += 1
        if not self.result:
            return None
        return event


class ProcessorChainTest(TestCase):
    def test_runs_in_order(self):
        seen = []

        def first(event):
            seen.append('first')
            event.tags = {'step': '1'}
            return event

        def second(event):
            seen.append('second')
            # changes made by the previous processor are visible
            assert event.tags == {'step': '1'}
            event.tags['step'] = '2'
            return event

        outcome = apply_processors(Event('foo'), [first, second])

        assert seen == ['first', 'second']
        assert isinstance(outcome, Kept)
        assert not outcome.dropped
        assert outcome.event.tags == {'step': '2'}

    def test_drop_stops_chain(self):
        p1 = CountingProcessor(result=False)
        p2 = CountingProcessor()

        outcome = apply_processors(Event('foo'), [p1, p2])

        assert isinstance(outcome, Dropped)
        assert outcome.dropped
        assert outcome.by is p1
        assert outcome.event is None
        assert p1.calls == 1
        assert p2.calls == 0

    def test_replacement_event_is_passed_on(self):
        replacement = Event('bar')
        p2 = Mock(side_effect=lambda event: event)
        del p2.process

        outcome = apply_processors(Event('foo'), [lambda event: replacement, p2])

        p2.assert_called_once_with(replacement)
        assert outcome.event is replacement

    def test_empty_chain(self):
        event = Event('foo')
        outcome = apply_processors(event, [])
        assert outcome.event is event
        assert apply_processors(event, None).event is event


class SendFilterTest(TestCase):
    def test_no_filter(self):
        event = Event('foo')
        outcome = apply_send_filter(event, None)
        assert outcome == Kept(event)

    def test_filter_drops(self):
        before_send = lambda event: None
        outcome = apply_send_filter(Event('foo'), before_send)
        assert outcome.dropped
        assert outcome.by is before_send

    def test_filter_modifies(self):
        def before_send(event):
            event.message = 'changed'
            return event

        outcome = apply_send_filter(Event('foo'), before_send)
        assert outcome.event.message == 'changed'

    def test_processor_object_as_filter(self):
        outcome = apply_send_filter(Event('foo'), CountingProcessor(result=False))
        assert outcome.dropped


class ProcessorTest(TestCase):
    def test_get_data_replaces_event(self):
        replacement = Event('bar')

        class Replacing(Processor):
            def get_data(self, event):
                return replacement

        assert Replacing().process(Event('foo')) is replacement

    def test_base_processor_is_passthrough(self):
        event = Event('foo', tags={'a': '1'}, extra={'b': 2})
        assert Processor().process(event) is event
        assert event.tags == {'a': '1'}


class SanitizePasswordsProcessorTest(TestCase):
    def test_tags(self):
        event = Event('foo', tags={
            'password': 'hello',
            'api_key': 'secret_key',
            'release': '1.0',
        })

        result = SanitizePasswordsProcessor().process(event)

        assert result.tags == {
            'password': SanitizePasswordsProcessor.MASK,
            'api_key': SanitizePasswordsProcessor.MASK,
            'release': '1.0',
        }

    def test_data(self):
        event = Event('foo', extra={
            'foo': 'bar',
            'the_secret': 'hello',
            'nested': {'access_token': 'oauth2 access token'},
        })

        result = SanitizePasswordsProcessor().process(event)

        extra = result.data['extra']
        assert extra['foo'] == 'bar'
        assert extra['the_secret'] == SanitizePasswordsProcessor.MASK
        assert extra['nested']['access_token'] == SanitizePasswordsProcessor.MASK

    def test_credit_card_values(self):
        event = Event('foo', tags={'card': '4242424242424242'})
        result = SanitizePasswordsProcessor().process(event)
        assert result.tags['card'] == SanitizePasswordsProcessor.MASK

    def test_sanitize_non_ascii(self):
        proc = SanitizePasswordsProcessor()
        result = proc.sanitize('__repr__: жили-были', '42')
        assert result == '42'
