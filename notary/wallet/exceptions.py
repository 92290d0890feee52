from notary.errors import ErrorKind, NotaryError


class WalletError(NotaryError):
    """Raised when the signing agent fails in an unexpected way."""

    kind = ErrorKind.AGENT_ERROR


class AgentMissingError(WalletError):
    """Raised when no signing agent is available."""

    kind = ErrorKind.AGENT_MISSING


class UserRejectedError(WalletError):
    """Raised when the user declines the authorization request."""

    kind = ErrorKind.USER_REJECTED


class NotAuthenticatedError(WalletError):
    """Raised when an authenticated action is attempted without a connected identity."""

    kind = ErrorKind.NOT_AUTHENTICATED
