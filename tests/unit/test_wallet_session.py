import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from notary.errors import ErrorKind
from notary.wallet.base import BaseWalletAgent
from notary.wallet.exceptions import (
    AgentMissingError,
    NotAuthenticatedError,
    UserRejectedError,
    WalletError,
)
from notary.wallet.jsonrpc_agent import JsonRpcWalletAgent
from notary.wallet.models import IdentitiesChanged, NetworkChanged, SessionStatus
from notary.wallet.session import WalletSession
from notary.wallet.static_agent import StaticWalletAgent
from tests.factories import ALICE, BOB, NETWORK_ID


class TestRestore:
    @pytest.mark.asyncio
    async def test_reconnects_silently_when_pre_authorized(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        agent.pre_authorized = True

        state = await session.restore()

        assert state.connected
        assert state.identity == ALICE
        assert agent.prompts == 0

    @pytest.mark.asyncio
    async def test_stays_disconnected_without_authorization(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        state = await session.restore()

        assert state.status is SessionStatus.DISCONNECTED
        assert agent.prompts == 0

    @pytest.mark.asyncio
    async def test_missing_agent_stays_disconnected(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        agent.available = False

        state = await session.restore()

        assert state.status is SessionStatus.DISCONNECTED
        assert state.last_error is None

    @pytest.mark.asyncio
    async def test_garbled_agent_reply_stays_disconnected(self) -> None:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, text="<html>oops</html>")
            )
        )
        agent = JsonRpcWalletAgent(
            rpc_url="http://agent.local:8545",
            timeout_seconds=5,
            poll_interval_seconds=0,
            client=client,
        )

        state = await WalletSession(agent).restore()

        assert state.status is SessionStatus.DISCONNECTED


class TestConnect:
    @pytest.mark.asyncio
    async def test_returns_first_identity(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        identity = await session.connect()

        assert identity == ALICE
        assert session.state.network_id == NETWORK_ID
        assert agent.prompts == 1

    @pytest.mark.asyncio
    async def test_connect_when_connected_does_not_prompt(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        await session.connect()
        identity = await session.connect()

        assert identity == ALICE
        assert agent.prompts == 1

    @pytest.mark.asyncio
    async def test_concurrent_connects_prompt_once(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        results = await asyncio.gather(session.connect(), session.connect())

        assert results == [ALICE, ALICE]
        assert agent.prompts == 1

    @pytest.mark.asyncio
    async def test_rejection_sets_error_state(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        agent.reject = True

        with pytest.raises(UserRejectedError):
            await session.connect()

        assert session.state.status is SessionStatus.ERROR
        assert session.state.last_error is ErrorKind.USER_REJECTED
        assert session.state.identity is None

    @pytest.mark.asyncio
    async def test_missing_agent_sets_error_state(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        agent.available = False

        with pytest.raises(AgentMissingError):
            await session.connect()

        assert session.state.last_error is ErrorKind.AGENT_MISSING

    @pytest.mark.asyncio
    async def test_no_identities_counts_as_rejection(self) -> None:
        session = WalletSession(StaticWalletAgent([], NETWORK_ID))

        with pytest.raises(UserRejectedError):
            await session.connect()

        assert session.state.last_error is ErrorKind.USER_REJECTED

    @pytest.mark.asyncio
    async def test_unexpected_agent_failure(self) -> None:
        agent = MagicMock(spec=BaseWalletAgent)
        agent.request_identities = AsyncMock(side_effect=WalletError("boom"))
        session = WalletSession(agent)

        with pytest.raises(WalletError):
            await session.connect()

        assert session.state.last_error is ErrorKind.AGENT_ERROR

    @pytest.mark.asyncio
    async def test_can_retry_after_rejection(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        agent.reject = True
        with pytest.raises(UserRejectedError):
            await session.connect()
        agent.reject = False

        assert await session.connect() == ALICE
        assert session.state.last_error is None


class TestDisconnect:
    @pytest.mark.asyncio
    async def test_clears_identity(self, session: WalletSession) -> None:
        await session.connect()

        session.disconnect()

        assert not session.state.connected
        assert session.state.identity is None
        assert session.state.network_id is None

    @pytest.mark.asyncio
    async def test_require_identity_after_disconnect(self, session: WalletSession) -> None:
        await session.connect()
        session.disconnect()

        with pytest.raises(NotAuthenticatedError):
            session.require_identity()


class TestExternalEvents:
    @pytest.mark.asyncio
    async def test_handle_identity_change(self, session: WalletSession) -> None:
        await session.connect()

        session.handle(IdentitiesChanged((BOB,)))

        assert session.require_identity() == BOB

    @pytest.mark.asyncio
    async def test_listen_applies_agent_notifications(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        await session.connect()
        agent.emit(NetworkChanged(11155111))
        agent.emit(IdentitiesChanged((BOB,)))
        await agent.close()

        await session.listen()

        assert session.state.identity == BOB
        assert session.state.network_id == 11155111

    @pytest.mark.asyncio
    async def test_listen_disconnects_on_empty_identities(
        self, agent: StaticWalletAgent, session: WalletSession
    ) -> None:
        await session.connect()
        agent.emit(IdentitiesChanged(()))
        await agent.close()

        await session.listen()

        assert session.state.status is SessionStatus.DISCONNECTED

    @pytest.mark.asyncio
    async def test_listen_moves_to_error_when_channel_fails(self) -> None:
        agent = StaticWalletAgent([ALICE], NETWORK_ID, pre_authorized=True)
        session = WalletSession(agent)
        await session.restore()

        async def failing_events():
            raise AgentMissingError("agent went away")
            yield

        agent.events = failing_events

        with pytest.raises(AgentMissingError):
            await session.listen()

        assert session.state.status is SessionStatus.ERROR
        assert session.state.last_error is ErrorKind.AGENT_MISSING
        assert session.state.identity is None

    def test_require_identity_when_never_connected(self, session: WalletSession) -> None:
        with pytest.raises(NotAuthenticatedError):
            session.require_identity()
