class KamusError(Exception):
    """Base error for the dictionary engine."""


class DatasetError(KamusError):
    """Raw dictionary source could not be read during preparation."""


class IndexUnavailable(KamusError):
    """
    Raised by search/suggest when the word index is empty.
    An empty index means the dataset was never prepared or failed to load,
    which is not the same thing as a query with zero matches.
    """
