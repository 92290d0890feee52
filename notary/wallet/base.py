from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from notary.wallet.models import AgentEvent


class BaseWalletAgent(ABC):
    """Contract for external signing agents."""

    @abstractmethod
    async def request_identities(self) -> list[str]:
        """Ask the agent (and possibly the user) to authorize identities.

        Raises:
            UserRejectedError: if the user declines.
            AgentMissingError: if no agent is reachable.
        """

    @abstractmethod
    async def authorized_identities(self) -> list[str]:
        """Return identities already authorized, without prompting the user."""

    @abstractmethod
    async def current_network(self) -> int:
        """Return the network id the agent is currently on."""

    @abstractmethod
    def events(self) -> AsyncIterator[AgentEvent]:
        """Subscription channel of identity and network change notifications."""

    async def close(self) -> None:
        """Release transport resources. Default: nothing to release."""
