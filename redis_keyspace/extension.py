import re

from structlog import get_logger

from .serializer import DELIMITER, StringKeyPrefixRedisSerializer

logger = get_logger()

_GLOB_SPECIAL = re.compile(r'([*?\[\]\\])')


class Extension:
    key_serializer: StringKeyPrefixRedisSerializer

    def prefixed_get(self, key: str):
        return self.get(self.key_serializer.encode(key))

    def prefixed_set(self, key: str, value, **kwargs):
        return self.set(self.key_serializer.encode(key), value, **kwargs)

    def prefixed_delete(self, *keys: str):
        return self.delete(*encode_keys(self.key_serializer, keys))

    def prefixed_exists(self, *keys: str):
        return self.exists(*encode_keys(self.key_serializer, keys))

    def prefixed_scan_iter(self, match: str = '*', count: int | None = None):
        serializer = self.key_serializer
        pattern = scan_pattern(serializer, match)
        logger.debug('scanning prefixed keys', pattern=pattern)
        for key in self.scan_iter(match=pattern, count=count):
            yield decode_key(serializer, key)


def encode_keys(serializer: StringKeyPrefixRedisSerializer, keys):
    return [serializer.encode(key) for key in keys]


def scan_pattern(serializer: StringKeyPrefixRedisSerializer, match: str) -> bytes:
    # only the prefix is escaped, `match` keeps its glob meaning
    escaped = _GLOB_SPECIAL.sub(r'\\\1', serializer.prefix)
    return (escaped + DELIMITER + match).encode(serializer.charset, 'replace')


def decode_key(serializer: StringKeyPrefixRedisSerializer, key: bytes | str) -> str:
    # clients created with decode_responses=True hand back str
    if isinstance(key, str):
        return serializer.remove_prefix(key)
    return serializer.decode(key)
