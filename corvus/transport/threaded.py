"""
corvus.transport.threaded
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import atexit
import logging
import os
import threading
from queue import Queue

from corvus.conf import defaults
from corvus.transport.base import AsyncTransport, FlushResult, FLUSHED
from corvus.transport.http import HTTPTransport

logger = logging.getLogger('corvus.errors')


class AsyncWorker(object):
    """
    Runs queued jobs on a single daemon thread and keeps count of the jobs
    that have not finished yet, so callers can wait on them.
    """
    _terminator = object()

    def __init__(self, shutdown_timeout=defaults.SHUTDOWN_TIMEOUT):
        self._queue = Queue(-1)
        self._lock = threading.Lock()
        self._pending_cond = threading.Condition()
        self._pending = 0
        self._thread = None
        self._thread_for_pid = None
        self.options = {
            'shutdown_timeout': shutdown_timeout,
        }
        self.start()

    @property
    def pending(self):
        with self._pending_cond:
            return self._pending

    def is_alive(self):
        if self._thread_for_pid != os.getpid():
            return False
        return self._thread is not None and self._thread.is_alive()

    def main_thread_terminated(self):
        size = self.pending
        if size and self._thread is not None:
            timeout = self.options['shutdown_timeout']
            print("Sentry is attempting to send %s pending error messages" % size)
            print("Waiting up to %s seconds" % timeout)
            if os.name == 'nt':
                print("Press Ctrl-Break to quit")
            else:
                print("Press Ctrl-C to quit")
            self.stop(timeout=timeout)

    def start(self):
        """
        Starts the task thread.
        """
        with self._lock:
            if not self.is_alive():
                self._thread = threading.Thread(target=self._target,
                                                name='corvus.AsyncWorker')
                self._thread.daemon = True
                self._thread.start()
                self._thread_for_pid = os.getpid()
                atexit.unregister(self.main_thread_terminated)
                atexit.register(self.main_thread_terminated)

    def stop(self, timeout=None):
        """
        Stops the task thread once every queued job has run, waiting at
        most ``timeout`` seconds. Synchronous!
        """
        with self._lock:
            if self._thread:
                self._queue.put_nowait(self._terminator)
                self._thread.join(timeout=timeout)
                self._thread = None
                self._thread_for_pid = None
            atexit.unregister(self.main_thread_terminated)

        pending = self.pending
        return FlushResult(pending == 0, pending)

    def flush(self, timeout=None):
        """
        Blocks until every queued job has run or ``timeout`` seconds have
        passed, leaving the thread running.
        """
        with self._pending_cond:
            self._pending_cond.wait_for(lambda: not self._pending, timeout)
            return FlushResult(self._pending == 0, self._pending)

    def queue(self, callback, *args, **kwargs):
        # a forked child inherits the worker but not its thread
        if not self.is_alive():
            self.start()

        with self._pending_cond:
            self._pending += 1
        self._queue.put_nowait((callback, args, kwargs))

    def _job_done(self):
        with self._pending_cond:
            self._pending -= 1
            if not self._pending:
                self._pending_cond.notify_all()

    def _target(self):
        while True:
            record = self._queue.get()
            if record is self._terminator:
                break
            callback, args, kwargs = record
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.error('Failed processing job', exc_info=True)
            finally:
                self._job_done()


class ThreadedTransport(AsyncTransport):
    """
    Moves the blocking ``send`` of the transport it is mixed into onto a
    background worker.
    """

    def __init__(self, *args, **kwargs):
        self.shutdown_timeout = kwargs.pop('shutdown_timeout',
                                           defaults.SHUTDOWN_TIMEOUT)
        self._worker = None
        super(ThreadedTransport, self).__init__(*args, **kwargs)

    def get_worker(self):
        if self._worker is None:
            self._worker = AsyncWorker(shutdown_timeout=self.shutdown_timeout)
        return self._worker

    def send_sync(self, url, data, headers, success_cb, failure_cb):
        try:
            status = super(ThreadedTransport, self).send(url, data, headers)
        except Exception as e:
            failure_cb(e)
        else:
            success_cb(status)

    def async_send(self, url, data, headers, success_cb, failure_cb):
        self.get_worker().queue(
            self.send_sync, url, data, headers, success_cb, failure_cb)

    def flush(self, timeout=None):
        if self._worker is None:
            return FLUSHED
        return self._worker.flush(timeout)

    def close(self, timeout=None):
        if self._worker is None:
            result = FLUSHED
        else:
            result = self._worker.stop(timeout)
        super(ThreadedTransport, self).close(timeout)
        return result


class ThreadedHTTPTransport(ThreadedTransport, HTTPTransport):
    pass
