"""
corvus.utils
~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


def varmap(func, var, context=None, name=None):
    """
    Executes ``func(key_name, value)`` on all values
    recurisively discovering dict and list scoped
    values.
    """
    if context is None:
        context = {}
    objid = id(var)
    if objid in context:
        return func(name, '<...>')
    context[objid] = 1
    if isinstance(var, dict):
        ret = dict((k, varmap(func, v, context, k))
                   for k, v in var.items())
    elif isinstance(var, (list, tuple)):
        ret = [varmap(func, f, context, name) for f in var]
    else:
        ret = func(name, var)
    del context[objid]
    return ret


def get_auth_header(protocol, timestamp, client, api_key, **kwargs):
    # the envelope endpoint expects this exact order and no spaces
    header = [
        ('sentry_version', protocol),
        ('sentry_client', client),
        ('sentry_key', api_key),
        ('sentry_timestamp', int(timestamp)),
    ]

    return 'Sentry %s' % ','.join('%s=%s' % (k, v) for k, v in header)


def get_object_name(obj):
    """
    Returns a readable name for a processor, used when reporting which
    one dropped an event.
    """
    name = getattr(obj, '__qualname__', None) or getattr(obj, '__name__', None)
    if name is None:
        name = type(obj).__name__
    return name
