from threading import Lock

from structlog import get_logger

from .exceptions import NamespaceInUseError
from .serializer import DEFAULT_CHARSET, StringKeyPrefixRedisSerializer

logger = get_logger()

_IN_USED = set()
_LOCK = Lock()


def register(prefix: str, charset: str = DEFAULT_CHARSET) -> StringKeyPrefixRedisSerializer:
    serializer = StringKeyPrefixRedisSerializer(prefix, charset)
    with _LOCK:
        if prefix in _IN_USED:
            raise NamespaceInUseError(f'prefix {prefix!r} is already registered')
        _IN_USED.add(prefix)
    logger.debug('namespace registered', prefix=prefix, charset=serializer.charset)
    return serializer


def unregister(prefix: str):
    with _LOCK:
        _IN_USED.remove(prefix)
    logger.debug('namespace unregistered', prefix=prefix)


def registered() -> frozenset[str]:
    with _LOCK:
        return frozenset(_IN_USED)
