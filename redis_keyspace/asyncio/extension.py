from structlog import get_logger

from ..extension import Extension as _Extension, decode_key, encode_keys, scan_pattern

logger = get_logger()


class Extension(_Extension):
    async def prefixed_get(self, key: str):
        return await self.get(self.key_serializer.encode(key))

    async def prefixed_set(self, key: str, value, **kwargs):
        return await self.set(self.key_serializer.encode(key), value, **kwargs)

    async def prefixed_delete(self, *keys: str):
        return await self.delete(*encode_keys(self.key_serializer, keys))

    async def prefixed_exists(self, *keys: str):
        return await self.exists(*encode_keys(self.key_serializer, keys))

    async def prefixed_scan_iter(self, match: str = '*', count: int | None = None):
        serializer = self.key_serializer
        pattern = scan_pattern(serializer, match)
        logger.debug('scanning prefixed keys', pattern=pattern)
        async for key in self.scan_iter(match=pattern, count=count):
            yield decode_key(serializer, key)
