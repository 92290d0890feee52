import asyncio

from notary.errors import ErrorKind
from notary.logging.logger import Log
from notary.wallet.base import BaseWalletAgent
from notary.wallet.exceptions import (
    AgentMissingError,
    NotAuthenticatedError,
    UserRejectedError,
    WalletError,
)
from notary.wallet.models import (
    AgentFailed,
    ConnectFailed,
    ConnectStarted,
    ConnectSucceeded,
    DisconnectRequested,
    SessionEvent,
    WalletSessionState,
)
from notary.wallet.transitions import DISCONNECTED, transition


class WalletSession:
    """Holds the signing identity used to authorize ledger writes.

    All changes, local or agent-driven, go through ``_apply``, which swaps in
    the state computed by :func:`transition`. Readers only ever see complete
    states.
    """

    def __init__(self, agent: BaseWalletAgent) -> None:
        self._agent = agent
        self._state = DISCONNECTED
        self._connect_lock = asyncio.Lock()

    @property
    def state(self) -> WalletSessionState:
        return self._state

    async def restore(self) -> WalletSessionState:
        """Reconnect silently if the agent already authorized an identity.

        Never prompts. A missing or failing agent leaves the session
        disconnected.
        """
        try:
            identities = await self._agent.authorized_identities()
            if not identities:
                return self._state
            network_id = await self._agent.current_network()
        except WalletError as exc:
            Log.debug(f"Silent wallet probe found nothing: {exc}")
            return self._state
        return self._apply(ConnectSucceeded(identities[0], network_id))

    async def connect(self) -> str:
        """Connect and return the active identity.

        Raises:
            UserRejectedError: the user declined, or authorized no identity.
            AgentMissingError: no signing agent is available.
            WalletError: any other agent failure.
        """
        async with self._connect_lock:
            if self._state.connected:
                return self._require(self._state)
            self._apply(ConnectStarted())
            try:
                identities = await self._agent.request_identities()
                if not identities:
                    raise UserRejectedError("No identity was authorized")
                network_id = await self._agent.current_network()
            except (UserRejectedError, AgentMissingError) as exc:
                self._apply(ConnectFailed(exc.kind))
                raise
            except WalletError:
                self._apply(AgentFailed(ErrorKind.AGENT_ERROR))
                raise
            state = self._apply(ConnectSucceeded(identities[0], network_id))
            Log.info("Wallet connected", identity=state.identity, network=network_id)
            return self._require(state)

    def disconnect(self) -> None:
        """Forget the identity locally. The agent's authorization is untouched."""
        self._apply(DisconnectRequested())

    def handle(self, event: SessionEvent) -> WalletSessionState:
        """Apply an agent notification (identity or network change)."""
        return self._apply(event)

    async def listen(self) -> None:
        """Consume the agent's notification channel until it closes.

        Raises:
            WalletError: if the channel fails; the session moves to Error first.
        """
        try:
            async for event in self._agent.events():
                self.handle(event)
        except WalletError as exc:
            Log.warning(f"Signing agent channel failed: {exc}", kind=exc.kind.value)
            self._apply(AgentFailed(exc.kind))
            raise

    def require_identity(self) -> str:
        """Return the connected identity or raise NotAuthenticatedError."""
        return self._require(self._state)

    def _apply(self, event: SessionEvent) -> WalletSessionState:
        previous = self._state
        self._state = transition(previous, event)
        if self._state != previous:
            Log.debug(
                "Wallet session transition",
                event=type(event).__name__,
                status=self._state.status.value,
            )
        return self._state

    @staticmethod
    def _require(state: WalletSessionState) -> str:
        if not state.connected or state.identity is None:
            raise NotAuthenticatedError("No connected wallet identity")
        return state.identity
