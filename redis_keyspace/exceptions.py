from redis.exceptions import DataError


class SerializationError(DataError):
    pass


class NullInputError(SerializationError, TypeError):
    pass


class KeyRangeError(SerializationError, IndexError):
    pass


class NamespaceInUseError(ValueError):
    pass
