from redis.client import Redis as _Redis, Pipeline as _Pipeline
from redis.connection import ConnectionPool

from .extension import Extension
from .serializer import DEFAULT_CHARSET, StringKeyPrefixRedisSerializer


class Pipeline(Extension, _Pipeline):
    pass


class Redis(Extension, _Redis):
    def __init__(
            self,
            *args,
            key_prefix: str,
            key_charset: str = DEFAULT_CHARSET,
            **kwargs
    ):
        super(Redis, self).__init__(*args, **kwargs)
        self.key_serializer = StringKeyPrefixRedisSerializer(key_prefix, key_charset)

    @classmethod
    def from_url(
            cls,
            url: str,
            *,
            key_prefix: str,
            key_charset: str = DEFAULT_CHARSET,
            **kwargs
    ):
        # redis-py's from_url would call cls() without the key options
        single_connection_client = kwargs.pop('single_connection_client', False)
        connection_pool = ConnectionPool.from_url(url, **kwargs)
        client = cls(
            connection_pool=connection_pool,
            single_connection_client=single_connection_client,
            key_prefix=key_prefix,
            key_charset=key_charset,
        )
        client.auto_close_connection_pool = True
        return client

    def pipeline(
            self,
            transaction: bool = True,
            shard_hint: str | None = None
    ):
        pipe = Pipeline(
            self.connection_pool, self.response_callbacks, transaction, shard_hint
        )
        pipe.key_serializer = self.key_serializer
        return pipe
