"""
corvus
~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'Event', 'Scope', 'load')

VERSION = '0.1.0'

from corvus.base import *  # NOQA
from corvus.conf import *  # NOQA
from corvus.events import Event  # NOQA
from corvus.scope import Scope  # NOQA
