"""
corvus.base
~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import os
import time

import corvus
from corvus import envelope
from corvus.conf import defaults
from corvus.conf.remote import Dsn
from corvus.events import Event
from corvus.exceptions import EncodingFailed, EnvelopeError
from corvus.processors import apply_processors, apply_send_filter
from corvus.scope import merge_scope, merge_tags
from corvus.transport.base import Transport
from corvus.transport.http import HTTPTransport
from corvus.transport.threaded import ThreadedHTTPTransport, ThreadedTransport
from corvus.utils import get_auth_header, get_object_name

__all__ = ('Client',)

DEFAULT_TRANSPORT = ThreadedHTTPTransport


class ClientState(object):
    READY = 'ready'
    CLOSED = 'closed'

    def __init__(self):
        self.status = self.READY
        self.close_result = None

    def is_ready(self):
        return self.status == self.READY

    def set_closed(self, result):
        self.status = self.CLOSED
        self.close_result = result

    def is_closed(self):
        return self.status == self.CLOSED


class Client(object):
    """
    The base client: runs events through the capture pipeline and hands
    the resulting envelopes to a transport.

    Will read default configuration from the environment variable
    ``SENTRY_DSN`` if available. An absent or broken DSN raises a
    :class:`corvus.exceptions.ConfigurationError`.

    >>> from corvus import Client, Scope

    >>> # Read configuration from ``os.environ['SENTRY_DSN']``
    >>> client = Client()

    >>> # Specify a DSN explicitly
    >>> client = Client(dsn='https://public_key@sentry.local/project_id')

    >>> # Record a message
    >>> event_id = client.captureMessage('Something happened',
    >>>                                  scope=Scope(tags={'key': 'value'}))

    >>> # Wait for queued envelopes before exiting
    >>> client.close()
    """
    logger = logging.getLogger('corvus')
    protocol_version = defaults.PROTOCOL_VERSION

    def __init__(self, dsn=None, **options):
        o = options

        self.configure_logging()

        # configure loggers first
        cls = self.__class__
        self.logger = logging.getLogger(
            '%s.%s' % (cls.__module__, cls.__name__))
        self.error_logger = logging.getLogger('corvus.errors')

        if dsn is None and os.environ.get(defaults.DSN_ENV_VAR):
            self.logger.debug("Configuring client from environment variable '%s'",
                              defaults.DSN_ENV_VAR)
            dsn = os.environ[defaults.DSN_ENV_VAR]

        self.dsn = Dsn.from_string(dsn)
        self.logger.debug('Configuring client for %s', self.dsn.envelope_url)

        self.before_send = o.get('before_send')
        self.name = o.get('name')
        self.tags = o.get('tags') or {}
        self.processors = list(o.get('processors') or defaults.PROCESSORS)
        self.timeout = o.get('timeout', defaults.TIMEOUT)
        self.shutdown_timeout = o.get('shutdown_timeout',
                                      defaults.SHUTDOWN_TIMEOUT)

        self.transport = self.get_transport(o.get('transport'))
        self.state = ClientState()

    def configure_logging(self):
        for name in ('corvus',):
            logger = logging.getLogger(name)
            if logger.handlers:
                continue
            logger.addHandler(logging.StreamHandler())
            logger.setLevel(logging.INFO)

    def get_transport(self, transport=None):
        if transport is None:
            transport = DEFAULT_TRANSPORT

        if isinstance(transport, Transport):
            return transport

        kwargs = {}
        if issubclass(transport, HTTPTransport):
            kwargs['timeout'] = self.timeout
        if issubclass(transport, ThreadedTransport):
            kwargs['shutdown_timeout'] = self.shutdown_timeout
        return transport(**kwargs)

    def get_client_string(self):
        return '%s/%s' % (defaults.CLIENT_NAME, corvus.VERSION)

    def prepare(self, event, scope=None):
        """
        Merges ``scope`` into ``event`` and runs it through the processor
        chain and ``before_send``. Returns ``None`` if the event was
        dropped.
        """
        event = merge_scope(event, scope)
        event = merge_tags(event, self.tags)

        if self.name:
            event.data.setdefault('server_name', self.name)

        processors = list(scope.event_processors) if scope is not None else []
        processors.extend(self.processors)

        outcome = apply_processors(event, processors)
        if outcome.dropped:
            self.logger.info("Processor '%s' dropped event %s",
                             get_object_name(outcome.by), event.event_id)
            return

        event = outcome.event
        outcome = apply_send_filter(event, self.before_send)
        if outcome.dropped:
            self.logger.info('Event %s dropped by before_send', event.event_id)
            return

        return outcome.event

    def capture(self, event, scope=None):
        """
        Captures and processes an event and pipes it off to the transport.

        >>> event = Event('Payment declined', tags={'provider': 'acme'})
        >>> client.capture(event, scope=scope)

        :param event: the :class:`corvus.events.Event` to send, or a message
                      string to wrap in one
        :param scope: an optional :class:`corvus.scope.Scope` whose tags and
                      event processors apply to this event only
        :return: the 32-length event id, or ``None`` if the event was
                 dropped or could not be encoded
        """
        if isinstance(event, str):
            event = Event(message=event)

        if self.state.is_closed():
            self.logger.warning('Client is closed, discarding event %s',
                                event.event_id)
            return

        try:
            prepared = self.prepare(event, scope)
        except Exception:
            self.error_logger.error('Failed to process event %s',
                                    event.event_id, exc_info=True)
            return

        if prepared is None:
            return

        try:
            data = self.encode(prepared)
        except EncodingFailed as e:
            self.error_logger.error('Failed to submit message: %s', e)
            return

        self.send_encoded(data)

        return prepared.event_id

    def captureMessage(self, message, scope=None, **kwargs):
        """
        Creates an event from ``message``.

        >>> client.captureMessage('My event just happened!')
        """
        return self.capture(Event(message=message, **kwargs), scope=scope)

    def _get_log_message(self, data):
        # decode message so we can show the actual event
        try:
            payload = self.decode(data)[2]
        except EnvelopeError:
            message = '<failed decoding data>'
        else:
            message = payload.get('message') or '<no message value>'
        return message

    def _successful_send(self, status, url):
        if 200 <= status < 300:
            self.logger.debug('Sentry accepted the envelope (status %s)', status)
            return

        self.error_logger.warning(
            'Sentry responded with status %s (url: %s)', status, url,
            extra={'data': {'remote_url': url, 'status': status}})

    def _failed_send(self, e, url, data):
        self.error_logger.error(
            'Unable to reach Sentry log server: %s (url: %s)', e, url,
            exc_info=True, extra={'data': {'remote_url': url}})

        message = self._get_log_message(data)
        self.error_logger.error('Failed to submit message: %r', message)

    def send_remote(self, url, data, headers=None):
        if headers is None:
            headers = {}

        self.logger.debug('Sending envelope of length %d to %s', len(data), url)

        def successful_send(status):
            self._successful_send(status, url)

        def failed_send(e):
            self._failed_send(e, url, data)

        try:
            if self.transport.is_async:
                self.transport.async_send(url, data, headers, successful_send,
                                          failed_send)
            else:
                successful_send(self.transport.send(url, data, headers))
        except Exception as e:
            failed_send(e)

    def send_encoded(self, data, auth_header=None):
        """
        Given an already serialized envelope, signs it and passes the
        payload off to ``send_remote``.
        """
        client_string = self.get_client_string()

        if not auth_header:
            auth_header = get_auth_header(
                protocol=self.protocol_version,
                timestamp=time.time(),
                client=client_string,
                api_key=self.dsn.public_key,
            )

        headers = {
            'User-Agent': client_string,
            'X-Sentry-Auth': auth_header,
            'Content-Type': envelope.CONTENT_TYPE,
        }

        self.send_remote(url=self.dsn.envelope_url, data=data, headers=headers)

    def encode(self, event):
        """
        Serializes ``event`` into envelope bytes.
        """
        return envelope.encode(event)

    def decode(self, data):
        return envelope.decode(data)

    def flush(self, timeout=None):
        """
        Waits up to ``timeout`` seconds for queued envelopes to be sent.

        >>> result = client.flush(5)
        >>> if not result.flushed:
        >>>     print('%d events still pending' % result.pending)
        """
        if timeout is None:
            timeout = self.shutdown_timeout
        return self.transport.flush(timeout)

    def close(self, timeout=None):
        """
        Flushes queued envelopes and releases the transport. Events
        captured afterwards are discarded. Calling ``close`` again returns
        the first result.
        """
        if self.state.is_closed():
            return self.state.close_result

        if timeout is None:
            timeout = self.shutdown_timeout

        result = self.transport.close(timeout)
        self.state.set_closed(result)

        if result.flushed:
            self.logger.debug('All queued events were sent')
        else:
            self.error_logger.warning(
                'Timed out after %s seconds with %d events pending',
                timeout, result.pending)
        return result

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
