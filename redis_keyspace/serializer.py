import codecs

from .exceptions import NullInputError, KeyRangeError

DEFAULT_CHARSET = 'utf-8'
DELIMITER = '::'


class RedisSerializer:
    def encode(self, value) -> bytes:
        raise NotImplementedError

    def decode(self, data: bytes):
        raise NotImplementedError

    def target_type(self) -> type:
        return object


class StringRedisSerializer(RedisSerializer):
    """ Converts strings into bytes and back using the given charset.

    Characters the charset can not represent are replaced, `?` when encoding
    and U+FFFD when decoding. None is passed through in both directions.
    """

    def __init__(self, charset: str = DEFAULT_CHARSET):
        if charset is None:
            raise ValueError('charset must not be None')
        info = codecs.lookup(charset)
        if not info._is_text_encoding:
            raise LookupError(f'{info.name!r} is not a text encoding')
        self._charset = info.name

    @property
    def charset(self):
        return self._charset

    def encode(self, value: str | None) -> bytes | None:
        if value is None:
            return None
        return value.encode(self._charset, 'replace')

    def decode(self, data: bytes | None) -> str | None:
        if data is None:
            return None
        return str(data, self._charset, 'replace')

    def target_type(self) -> type:
        return str


class StringKeyPrefixRedisSerializer(StringRedisSerializer):
    """ String serializer that prepends `prefix::` to every key.

    Meant to be used as key serializer when several clients share one redis
    instance. Decoding drops the first `len(prefix) + 2` characters of the
    decoded text, it never searches for the delimiter, so prefixes and keys
    may contain `::` themselves.

    Unlike StringRedisSerializer, None is not a valid key: both directions
    raise NullInputError. Decoding text shorter than the prefix and delimiter
    raises KeyRangeError.
    """

    def __init__(self, prefix: str, charset: str = DEFAULT_CHARSET):
        if prefix is None:
            raise ValueError('prefix must not be None')
        super(StringKeyPrefixRedisSerializer, self).__init__(charset)
        self._prefix = prefix
        self._full_prefix = prefix + DELIMITER
        self._offset = len(self._full_prefix)

    @property
    def prefix(self):
        return self._prefix

    def encode(self, value: str) -> bytes:
        if value is None:
            raise NullInputError('can not encode None as a prefixed key')
        return (self._full_prefix + value).encode(self._charset, 'replace')

    def decode(self, data: bytes) -> str:
        if data is None:
            raise NullInputError('can not decode None as a prefixed key')
        return self.remove_prefix(str(data, self._charset, 'replace'))

    def remove_prefix(self, text: str) -> str:
        if len(text) < self._offset:
            raise KeyRangeError(
                f'key {text!r} is shorter than prefix {self._full_prefix!r}'
            )
        return text[self._offset:]

    def contains(self, data: bytes) -> bool:
        return data.startswith(self._full_prefix.encode(self._charset, 'replace'))

    def __repr__(self):
        return f'{self.__class__.__name__}({self._prefix!r}, {self._charset!r})'
