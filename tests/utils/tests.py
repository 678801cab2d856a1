from corvus.utils import get_auth_header, get_object_name, varmap
from corvus.utils.testutils import TestCase


class GetAuthHeaderTest(TestCase):
    def test_fixed_form(self):
        header = get_auth_header(protocol='6', timestamp=1328055286.51,
                                 client='corvus/1.0', api_key='public')
        assert header == (
            'Sentry sentry_version=6,sentry_client=corvus/1.0,'
            'sentry_key=public,sentry_timestamp=1328055286')


class VarmapTest(TestCase):
    def test_nested(self):
        data = {'a': [1, {'b': 2}], 'c': 3}
        result = varmap(lambda k, v: v * 10, data)
        assert result == {'a': [10, {'b': 20}], 'c': 30}

    def test_recursive_structure(self):
        data = {}
        data['self'] = data
        result = varmap(lambda k, v: v, data)
        assert result == {'self': '<...>'}


class GetObjectNameTest(TestCase):
    def test_function(self):
        def drop_everything(event):
            return None

        assert get_object_name(drop_everything).endswith('drop_everything')

    def test_instance(self):
        class Dropper(object):
            def process(self, event):
                return None

        assert get_object_name(Dropper()) == 'Dropper'
