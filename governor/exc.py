class Error(Exception):
    """Baseclass for Governor exceptions."""


class RepositoryUnavailableException(Error):
    """The storage layer failed while reading or writing.

    Raised in place of the underlying driver error so that callers never have to know which
    storage backend is in use.  The whole operation is aborted; no partial result is returned.
    """


class OperationCancelledException(Error):
    """The caller cancelled the operation or its deadline expired."""
