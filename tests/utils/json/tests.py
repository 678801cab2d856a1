# -*- coding: utf-8 -*-

import datetime
import uuid
from decimal import Decimal

import pytest

from corvus.utils import json
from corvus.utils.testutils import TestCase


class JSONTest(TestCase):
    def test_uuid(self):
        res = uuid.uuid4()
        assert json.dumps(res) == '"%s"' % res.hex

    def test_datetime(self):
        res = datetime.datetime(day=1, month=1, year=2011, hour=1, minute=1, second=1)
        assert json.dumps(res) == '"2011-01-01T01:01:01Z"'

    def test_date(self):
        assert json.dumps(datetime.date(2011, 1, 2)) == '"2011-01-02"'

    def test_set(self):
        res = set(['foo', 'bar'])
        assert json.dumps(res) in ('["foo","bar"]', '["bar","foo"]')

    def test_frozenset(self):
        res = frozenset(['foo', 'bar'])
        assert json.dumps(res) in ('["foo","bar"]', '["bar","foo"]')

    def test_bytes(self):
        assert json.dumps(b'foo') == '"foo"'

    def test_compact_separators(self):
        assert json.dumps({'a': 1, 'b': [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_non_ascii_is_kept(self):
        assert json.dumps(u'☃') == u'"☃"'

    def test_unknown_type(self):

        class Unknown(object):
            def __repr__(self):
                return 'Unknown object'

        with pytest.raises(TypeError):
            json.dumps(Unknown())

    def test_decimal(self):
        with pytest.raises(TypeError):
            json.dumps({'decimal': Decimal('123.45')})

    def test_tuple_keys(self):
        with pytest.raises(TypeError):
            json.dumps({(1, 2): 'tuple_key'})

    def test_loads_bytes(self):
        assert json.loads(b'{"a":"\xc3\xbc"}') == {'a': u'ü'}
