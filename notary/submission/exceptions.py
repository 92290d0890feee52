from notary.errors import ErrorKind, NotaryError


class SubmissionError(NotaryError):
    """Base exception for submission preconditions and outcomes."""

    kind = ErrorKind.LEDGER_REJECTED


class InvalidSubmissionError(SubmissionError):
    """Raised when the item id is empty or the digest is malformed."""

    kind = ErrorKind.INVALID_SUBMISSION


class DuplicateSubmissionError(SubmissionError):
    """Raised when the (submitter, item id) pair already has a ledger record."""

    kind = ErrorKind.DUPLICATE_SUBMISSION
