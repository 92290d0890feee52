from notary.errors import ErrorKind, NotaryError


class LedgerError(NotaryError):
    """Raised when the ledger refuses or fails an operation."""

    kind = ErrorKind.LEDGER_REJECTED


class LedgerAlreadyExistsError(LedgerError):
    """Raised when a write targets a pair that already has a record."""

    kind = ErrorKind.DUPLICATE_SUBMISSION


class LedgerUnauthorizedError(LedgerError):
    """Raised when the signer declines or is not allowed to sign the write."""

    kind = ErrorKind.UNAUTHORIZED


class LedgerUnreachableError(LedgerError):
    """Raised when the ledger endpoint cannot be contacted."""

    kind = ErrorKind.UNREACHABLE


class LedgerTimeoutError(LedgerError):
    """Raised when the ledger does not answer in time.

    The operation may still have been applied; callers must not treat this
    as proof that a write did not happen.
    """

    kind = ErrorKind.TIMEOUT
