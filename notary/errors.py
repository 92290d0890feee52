from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Failure categories shared by the wallet, ledger and submission paths."""

    AGENT_MISSING = "agent_missing"
    USER_REJECTED = "user_rejected"
    AGENT_ERROR = "agent_error"
    NOT_AUTHENTICATED = "not_authenticated"
    INVALID_SUBMISSION = "invalid_submission"
    DUPLICATE_SUBMISSION = "duplicate_submission"
    UNAUTHORIZED = "unauthorized"
    UNREACHABLE = "unreachable"
    TIMEOUT = "timeout"
    LEDGER_REJECTED = "ledger_rejected"


MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.AGENT_MISSING: (
        "No signing agent is available. Install or start a wallet to continue."
    ),
    ErrorKind.USER_REJECTED: (
        "Connection rejected. Approve the connection request in your wallet."
    ),
    ErrorKind.AGENT_ERROR: "The signing agent reported an unexpected error.",
    ErrorKind.NOT_AUTHENTICATED: "Connect a wallet before submitting.",
    ErrorKind.INVALID_SUBMISSION: (
        "The submission is incomplete: an item id and a valid file hash are required."
    ),
    ErrorKind.DUPLICATE_SUBMISSION: (
        "This item has already been submitted from this address and cannot be replaced."
    ),
    ErrorKind.UNAUTHORIZED: "The signing agent refused to authorize the transaction.",
    ErrorKind.UNREACHABLE: (
        "The ledger could not be reached. Check the network and try again."
    ),
    ErrorKind.TIMEOUT: (
        "The ledger did not confirm in time. The submission may still be recorded; "
        "verify before submitting again."
    ),
    ErrorKind.LEDGER_REJECTED: "The ledger rejected the transaction.",
}


class NotaryError(Exception):
    """Base exception for every typed failure the notary surfaces."""

    kind: ClassVar[ErrorKind] = ErrorKind.AGENT_ERROR


def describe_error(exc: BaseException) -> str:
    """Map an exception to the message shown to the user."""
    if isinstance(exc, NotaryError):
        return MESSAGES[exc.kind]
    return f"Unexpected error: {exc}"
