"""
corvus.scripts.runner
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import getpass
import logging
import os
import sys
from optparse import OptionParser

from corvus import Client
from corvus.exceptions import ConfigurationError
from corvus.utils import json


def store_json(option, opt_str, value, parser):
    try:
        value = json.loads(value)
    except ValueError:
        print("Invalid JSON was used for option %s.  Received: %s" % (opt_str, value))
        sys.exit(1)
    setattr(parser.values, option.dest, value)


def get_loadavg():
    if hasattr(os, 'getloadavg'):
        return os.getloadavg()
    return None


def get_uid():
    try:
        return getpass.getuser()
    except Exception:
        return None


class RecordingHandler(logging.Handler):
    """Remembers whether anything went wrong while sending."""

    def __init__(self):
        super(RecordingHandler, self).__init__(level=logging.WARNING)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def send_test_message(client, options):
    print("Client configuration:")
    for k in ('public_key', 'project', 'envelope_url'):
        print('  %-15s: %s' % (k, getattr(client.dsn, k)))
    print()

    errors = RecordingHandler()
    logging.getLogger('corvus.errors').addHandler(errors)

    print('Sending a test message...',)

    try:
        ident = client.captureMessage(
            message='This is a test message generated using ``corvus test``',
            tags=options.get('tags') or {},
            logger='corvus.test',
            extra={
                'user': get_uid(),
                'loadavg': get_loadavg(),
            },
        )
        result = client.close()
    finally:
        logging.getLogger('corvus.errors').removeHandler(errors)

    if ident is None or errors.records or not result.flushed:
        print('error!')
        return False

    print('success!')
    print('Event ID was %r' % (ident,))
    return True


def main(argv=None):
    root = logging.getLogger('corvus.errors')
    root.setLevel(logging.DEBUG)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
        # already printed here, keep it off the 'corvus' handler
        root.propagate = False

    parser = OptionParser(usage='%prog test [DSN]')
    parser.add_option("--tags", action="callback", callback=store_json,
        type="string", nargs=1, dest="tags")
    (opts, args) = parser.parse_args(argv)

    if not args or args[0] != 'test':
        parser.print_usage()
        sys.exit(1)

    dsn = ' '.join(args[1:]) or os.environ.get('SENTRY_DSN')
    if not dsn:
        print("Error: No configuration detected!")
        print("You must either pass a DSN to the command, or set the SENTRY_DSN environment variable.")
        sys.exit(1)

    print("Using DSN configuration:")
    print(" ", dsn)
    print()

    try:
        client = Client(dsn)
    except ConfigurationError as e:
        print("Error: %s" % (e,))
        sys.exit(1)

    if not send_test_message(client, opts.__dict__):
        sys.exit(1)
