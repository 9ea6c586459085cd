import unittest

from redis_keyspace import namespace
from redis_keyspace.exceptions import NamespaceInUseError
from redis_keyspace.serializer import StringKeyPrefixRedisSerializer


class Test(unittest.TestCase):

    def tearDown(self):
        for prefix in namespace.registered():
            namespace.unregister(prefix)

    def test_register(self):
        s = namespace.register('orders', 'ascii')
        self.assertIsInstance(s, StringKeyPrefixRedisSerializer)
        self.assertEqual(s.prefix, 'orders')
        self.assertEqual(s.charset, 'ascii')
        self.assertEqual(namespace.registered(), frozenset({'orders'}))

    def test_register_twice(self):
        namespace.register('orders')
        with self.assertRaises(NamespaceInUseError):
            namespace.register('orders')

    def test_distinct_prefixes_do_not_collide(self):
        orders = namespace.register('orders')
        users = namespace.register('users')
        self.assertNotEqual(orders.encode('1'), users.encode('1'))
        self.assertFalse(users.contains(orders.encode('1')))

    def test_unregister(self):
        namespace.register('orders')
        namespace.unregister('orders')
        self.assertEqual(namespace.registered(), frozenset())
        namespace.register('orders')

    def test_unregister_unknown(self):
        with self.assertRaises(KeyError):
            namespace.unregister('missing')

    def test_invalid_charset_is_not_registered(self):
        with self.assertRaises(LookupError):
            namespace.register('orders', 'no-such-charset')
        self.assertNotIn('orders', namespace.registered())
