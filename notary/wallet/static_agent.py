"""Static signing agent.

Holds a fixed list of identities and a network id in process. Notifications
are pushed with ``emit`` and delivered through ``events``. Useful for local
development against the in-memory ledger and for tests.
"""

import asyncio
from collections.abc import AsyncIterator

from notary.wallet.base import BaseWalletAgent
from notary.wallet.exceptions import AgentMissingError, UserRejectedError
from notary.wallet.models import AgentEvent, IdentitiesChanged


class StaticWalletAgent(BaseWalletAgent):
    def __init__(
        self,
        identities: list[str],
        network_id: int,
        *,
        pre_authorized: bool = False,
        reject: bool = False,
        available: bool = True,
    ) -> None:
        self.identities = list(identities)
        self.network_id = network_id
        self.pre_authorized = pre_authorized
        self.reject = reject
        self.available = available
        self.prompts = 0
        self._queue: asyncio.Queue[AgentEvent | None] = asyncio.Queue()

    async def request_identities(self) -> list[str]:
        self._ensure_available()
        self.prompts += 1
        if self.reject:
            raise UserRejectedError("User rejected the request")
        self.pre_authorized = True
        return list(self.identities)

    async def authorized_identities(self) -> list[str]:
        self._ensure_available()
        return list(self.identities) if self.pre_authorized else []

    async def current_network(self) -> int:
        self._ensure_available()
        return self.network_id

    def emit(self, event: AgentEvent) -> None:
        """Queue a notification, updating the agent's own view first."""
        if isinstance(event, IdentitiesChanged):
            self.identities = list(event.identities)
        else:
            self.network_id = event.network_id
        self._queue.put_nowait(event)

    async def events(self) -> AsyncIterator[AgentEvent]:
        while True:
            event = await self._queue.get()
            if event is None:
                return
            yield event

    async def close(self) -> None:
        self._queue.put_nowait(None)

    def _ensure_available(self) -> None:
        if not self.available:
            raise AgentMissingError("No signing agent installed")
