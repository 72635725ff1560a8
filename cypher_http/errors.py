import typing as t


class CypherHttpError(Exception):
    """Base class for every error raised by this package."""


class ReuseError(CypherHttpError, RuntimeError):
    def __init__(self, message: str = "Can't reuse transaction") -> None:
        super().__init__(message)


class ConfigurationError(CypherHttpError, ValueError):
    def __init__(
        self, message: str = "Attempt to use a cache that has not been configured"
    ) -> None:
        super().__init__(message)


class UnsupportedPropertyTypeError(CypherHttpError, TypeError):
    def __init__(self, key: str, value: t.Any) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Property `{key}` has unsupported type {type(value).__name__}"
        )


class TransactionFailedError(CypherHttpError):
    """The database refused to open the transaction.

    A rollback has been requested but is not guaranteed to have succeeded.
    """

    def __init__(self, status: int, reason: str) -> None:
        self.status = status
        self.reason = reason
        super().__init__(reason or f"Transaction failed with HTTP {status}")


class CypherError(CypherHttpError):
    """The database reported query level errors for the batch."""

    def __init__(self, errors: t.List[t.Dict[str, t.Any]]) -> None:
        self.errors = errors
        super().__init__(errors)


class CommitFailedError(CypherHttpError):
    """The commit request did not succeed.

    The statements were accepted when the transaction was opened, so the
    caller cannot tell whether the database applied them or let the open
    transaction expire. Check the graph before retrying non-idempotent work.
    """

    def __init__(self, status: int, reason: str) -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"commit failed: HTTP {status} {reason}".rstrip())
