class CollectionError(Exception):
    """Base for every error raised by collext."""


class EmptyCollectionError(CollectionError, IndexError):
    pass


class InvalidArgumentError(CollectionError, ValueError):
    pass
